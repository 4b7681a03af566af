import math

import pytest

from chat_analyzer.analyzer_enums import TokenType
from chat_analyzer.analyzer_models import Message, Token
from strategies import TfidfStrategy, calc_tfidf, top_terms


def message(identity, *words):
    tokens = [Token(TokenType.ENGLISH if word.isascii() else TokenType.BIGRAM, word) for word in words]
    return Message(time=0, id=identity, tokens=tokens)


@pytest.fixture
def messages():
    return [
        message("1", "hello", "hello", "世界"),
        message("1", "hello"),
        message("2", "hello", "world"),
        message("3", "世界", "solo"),
        message("4", "other"),
        message("5"),
    ]


def test_scores(messages):
    tfidf = calc_tfidf(messages)
    idf = math.log(5 / 3)  # 5 个发过消息的身份，df=2

    assert tfidf["1"] == {"hello": pytest.approx(3 / 4 * idf), "世界": pytest.approx(1 / 4 * idf)}
    assert tfidf["2"] == {"hello": pytest.approx(1 / 2 * idf)}
    assert tfidf["3"] == {"世界": pytest.approx(1 / 2 * idf)}


def test_single_speaker_words_are_never_scored(messages):
    tfidf = calc_tfidf(messages)
    scored = {word for scores in tfidf.values() for word in scores}
    assert "world" not in scored
    assert "solo" not in scored
    assert tfidf["4"] == {}


def test_identities_without_tokens_have_no_entry(messages):
    assert "5" not in calc_tfidf(messages)


def test_top_terms(messages):
    tfidf = calc_tfidf(messages)
    assert top_terms(tfidf, "1") == ["hello", "世界"]
    assert top_terms(tfidf, "1", 1) == ["hello"]
    assert top_terms(tfidf, "404") == []


def test_strategy_and_empty_input(messages):
    assert TfidfStrategy().compute(messages, {}) == calc_tfidf(messages)
    assert calc_tfidf([]) == {}
