import json

import pytest

from configs import ConfigParser
from exceptions import (
    InvalidTypeError,
    InvalidValueError,
    MissingRequiredFieldError,
    ParseBaseError,
    ParseFileNotFoundError
)
from utils import ConfigLoader


@pytest.fixture
def base_config(tmp_path):
    export_file = tmp_path / "chat.txt"
    export_file.write_text("", encoding="utf-8")
    return {
        "input_config": {"export_path": str(export_file)},
        "output_config": {"export_path": str(tmp_path / "out")},
    }


def test_defaults(base_config, tmp_path):
    app_config = ConfigParser.parse(base_config)

    assert app_config.input_config.encoding == "utf-8"
    assert app_config.input_config.strict_timestamps is False
    assert app_config.bot_config.interactive_bot_ids == []
    assert app_config.interaction_config.session_gaps == [30, 1800]
    assert app_config.interaction_config.edge_threshold == 1
    assert app_config.tfidf_config.top_n == 10
    assert app_config.stat_config.enabled_stats == ["interaction", "tfidf"]
    assert (tmp_path / "out").is_dir()


def test_bot_ids_are_stripped(base_config):
    base_config["bot_config"] = {"interactive_bot_ids": [" 9 ", "", "  "], "non_interactive_bot_ids": ["8"]}
    app_config = ConfigParser.parse(base_config)
    assert app_config.bot_config.interactive_bot_ids == ["9"]
    assert app_config.bot_config.non_interactive_bot_ids == ["8"]


def test_missing_export_path():
    with pytest.raises(MissingRequiredFieldError):
        ConfigParser.parse({})


def test_export_file_must_exist(tmp_path):
    with pytest.raises(ParseFileNotFoundError):
        ConfigParser.parse({"input_config": {"export_path": str(tmp_path / "missing.txt")}})


@pytest.mark.parametrize("section, values, error", [
    ("interaction_config", {"session_gaps": [0]}, InvalidValueError),
    ("interaction_config", {"session_gaps": []}, InvalidValueError),
    ("interaction_config", {"edge_threshold": -1}, InvalidValueError),
    ("interaction_config", {"edge_threshold": "1"}, InvalidTypeError),
    ("tfidf_config", {"top_n": True}, InvalidValueError),
    ("stat_config", {"enabled_stats": ["foo"]}, InvalidValueError),
    ("bot_config", {"interactive_bot_ids": "9"}, InvalidTypeError),
    ("bot_config", {"interactive_bot_ids": [9]}, InvalidTypeError),
    ("input_config", {"strict_timestamps": "yes"}, InvalidTypeError),
])
def test_invalid_values(base_config, section, values, error):
    base_config.setdefault(section, {}).update(values)
    with pytest.raises(error):
        ConfigParser.parse(base_config)


def test_config_errors_share_base_class(base_config):
    base_config["tfidf_config"] = {"top_n": 0}
    with pytest.raises(ParseBaseError):
        ConfigParser.parse(base_config)


def test_config_loader(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"tfidf_config": {"top_n": 3}}), encoding="utf-8")
    assert ConfigLoader.load_config(str(config_file)) == {"tfidf_config": {"top_n": 3}}


def test_config_loader_errors(tmp_path):
    with pytest.raises(ParseBaseError):
        ConfigLoader.load_config(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(ParseBaseError):
        ConfigLoader.load_config(str(broken))
