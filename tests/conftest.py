from typing import List

import pytest

from chat_analyzer.analyzer_models import Message


@pytest.fixture
def make_messages():
    """按身份序列构造消息，时间依次为0,1,2..."""
    def _make(ids: List[str]) -> List[Message]:
        return [Message(time=i, id=identity) for i, identity in enumerate(ids)]
    return _make
