import asyncio
import json

import pytest

from chat_analyzer.analyzer_models import AnalyzerResult
from chat_analyzer.chat_record_analyzer import ChatRecordAnalyzer
from configs import AppConfig, BotConfig, InputConfig, OutputConfig, StatConfig
from exceptions import ExportReadError
from io_put import DataConverterFacade, format_tfidf_report, save_analyzer_result_to_json
from utils import read_export_text


def build_export():
    lines = ["消息记录导出"]
    for day in (1, 2, 3):
        lines += [
            f"2023-05-0{day} 10:00:00 Alice(1)",
            "你好世界",
            f"2023-05-0{day} 10:00:10 Bob(2)",
            "世界和平 hello @Alice",
        ]
    lines += [
        "2023-05-01 10:00:05 Robot(9)",
        "[图片]",
        "2023-02-30 10:00:00 Ghost(7)",
        "幽灵文本",
    ]
    return "\r\n".join(lines) + "\r\n"


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(
        input_config=InputConfig(export_path=str(tmp_path / "chat.txt")),
        bot_config=BotConfig(non_interactive_bot_ids=["9"]),
        output_config=OutputConfig(export_path=str(tmp_path / "out")),
    )


def run(app_config, text):
    return asyncio.run(ChatRecordAnalyzer(app_config).run(text))


def test_full_pipeline(app_config):
    result = run(app_config, build_export())

    assert result.message_count == 6
    assert result.ranked_ids == ["1", "2"]
    assert result.representative_alias == {"1": "Alice", "2": "Bob"}
    assert [header.line_no for header in result.rejected_headers] == [16]

    assert result.interaction_graph == {
        "nodes": [{"id": "1", "group": 0}, {"id": "2", "group": 1}],
        "links": [{"source": "1", "target": "2", "value": 1.0}],
    }
    assert set(result.tfidf["1"]) == {"世界"}
    assert set(result.tfidf["2"]) == {"世界"}
    assert result.top_terms == {"1": ["世界"], "2": ["世界"]}
    assert [summary.gap_limit for summary in result.session_summaries] == [30, 1800]
    assert result.graph_summary["node_count"] == 2
    assert result.graph_summary["edge_count"] == 1
    assert result.graph_summary["weighted_degree"] == {"1": 1.0, "2": 1.0}


def test_pipeline_is_deterministic(app_config):
    first = DataConverterFacade.to_dict(run(app_config, build_export()))
    second = DataConverterFacade.to_dict(run(app_config, build_export()))
    assert first == second


def test_empty_input(app_config):
    result = run(app_config, "")
    assert result.message_count == 0
    assert result.ranked_ids == []
    assert result.interaction_graph == {"nodes": [], "links": []}
    assert result.tfidf == {}
    assert format_tfidf_report(result) == ""


def test_only_enabled_stats_run(app_config):
    app_config.stat_config = StatConfig(enabled_stats=["tfidf"])
    result = run(app_config, build_export())
    assert result.interaction_graph is None
    assert result.graph_summary is None
    assert result.tfidf is not None


def test_format_tfidf_report():
    result = AnalyzerResult(
        message_count=3,
        representative_alias={"1": "Alice", "2": "Bob", "3": "Carol"},
        ranked_ids=["2", "1", "3"],
        tfidf={"1": {"a": 0.2, "b": 0.1}, "2": {"c": 0.3}},
        top_terms={"1": ["a", "b"], "2": ["c"]},
    )
    assert format_tfidf_report(result) == "Bob: c\nAlice: a, b\n"


def test_save_result_to_json(app_config):
    result = run(app_config, build_export())
    path = save_analyzer_result_to_json(result, app_config)

    with open(path, encoding="utf-8") as f:
        saved = json.load(f)
    assert saved["message_count"] == 6
    assert saved["interaction_graph"]["links"][0]["value"] == 1.0
    assert saved["rejected_headers"][0]["line_no"] == 16
    assert saved["graph_summary"]["edge_count"] == 1


def test_read_export_text(tmp_path):
    export_file = tmp_path / "chat.txt"
    export_file.write_bytes("2023-05-01 10:00:00 Alice(1)\r\n你好\r\n".encode("utf-8"))
    assert read_export_text(str(export_file)) == "2023-05-01 10:00:00 Alice(1)\r\n你好\r\n"

    with pytest.raises(ExportReadError):
        read_export_text(str(tmp_path / "missing.txt"))
