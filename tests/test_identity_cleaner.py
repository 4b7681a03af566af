import asyncio
import base64
import hashlib

import pytest

from chat_analyzer.analyzer_models import Message
from cleaning import BLACK_LIST, clean, remove_id, salted_digest
from exceptions import HashDigestError


def ids(messages):
    return [message.id for message in messages]


def digest_of(identity):
    raw = hashlib.sha256(("🐕" + identity + "🐶").encode("utf-8")).digest()
    return base64.b64encode(raw).decode("ascii")


def test_remove_id_without_parent(make_messages):
    assert ids(remove_id(make_messages(["A", "Bot", "B", "Bot"]), "Bot")) == ["A", "B"]


def test_remove_id_with_parent_drops_nearest_predecessor(make_messages):
    assert ids(remove_id(make_messages(["A", "A", "Bot", "B"]), "Bot", remove_parent=True)) == ["A", "B"]


def test_remove_id_with_parent_skips_already_removed(make_messages):
    # 第一条Bot移除A；第二条Bot之前已无未标记的消息
    assert ids(remove_id(make_messages(["A", "Bot", "Bot", "B"]), "Bot", remove_parent=True)) == ["B"]


def test_remove_id_first_message_has_no_parent(make_messages):
    assert ids(remove_id(make_messages(["Bot", "A"]), "Bot", remove_parent=True)) == ["A"]


def test_remove_id_does_not_mutate_input(make_messages):
    messages = make_messages(["A", "Bot"])
    remove_id(messages, "Bot", remove_parent=True)
    assert ids(messages) == ["A", "Bot"]


def test_salted_digest_matches_sha256_base64():
    assert asyncio.run(salted_digest("123456")) == digest_of("123456")


def test_salted_digest_failure_is_fatal():
    with pytest.raises(HashDigestError):
        asyncio.run(salted_digest("\ud800"))


def test_blacklist_is_fixed_table():
    assert "k9URW8fQMo2wan1I7CmyAxX9RBISFj3xoNtcbLvQk5M=" in BLACK_LIST


def test_clean_removes_blacklisted_and_bots(make_messages):
    messages = make_messages(["1", "666", "2", "9", "3", "8"])
    aliases = {
        "1": {"Alice": 1}, "666": {"Spy": 1}, "2": {"Bob": 1},
        "9": {"Helper": 1}, "3": {"Carol": 1}, "8": {"Feed": 1},
    }

    result = asyncio.run(clean(
        messages, aliases,
        interactive_bot_ids=["9"],
        non_interactive_bot_ids=["8"],
        extra_blacklist=[digest_of("666")]
    ))

    # 9 是交互式机器人，连同上一条（Bob的指令）一起移除
    assert ids(result.messages) == ["1", "3"]
    assert list(result.aliases) == ["1", "2", "3"]
    assert result.removed_ids == ["666", "9", "8"]
    # 输入不被修改
    assert ids(messages) == ["1", "666", "2", "9", "3", "8"]
    assert "666" in aliases


def test_clean_ignores_unknown_bot_ids(make_messages):
    result = asyncio.run(clean(make_messages(["1"]), {"1": {"Alice": 1}}, non_interactive_bot_ids=["404"]))
    assert ids(result.messages) == ["1"]
    assert result.removed_ids == []


def test_clean_hash_failure_aborts():
    aliases = {"\ud800": {"Broken": 1}}
    with pytest.raises(HashDigestError):
        asyncio.run(clean([Message(time=0, id="\ud800")], aliases))


def test_clean_empty_input():
    result = asyncio.run(clean([], {}))
    assert result.messages == []
    assert result.aliases == {}
