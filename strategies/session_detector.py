import logging
from typing import List

from chat_analyzer.analyzer_models import Message, Session, SessionSummary

logger = logging.getLogger(__name__)


def detect_sessions(messages: List[Message], gap_limit: int) -> List[Session]:
    """
    按时间间隔切分会话：与上一条消息间隔超过 gap_limit 秒即开启新会话
    :return: 非空会话列表，按原顺序覆盖全部消息
    """
    sessions: List[Session] = []
    last_time = float("-inf")  # 第一条消息必然开启新会话

    for message in messages:
        if message.time - last_time > gap_limit:
            sessions.append([])
        sessions[-1].append(message)
        last_time = message.time

    return sessions


def summarize_sessions(sessions: List[Session], gap_limit: int) -> SessionSummary:
    """会话数量与平均长度"""
    count = len(sessions)
    mean_length = sum(len(session) for session in sessions) / count if count else 0.0
    return SessionSummary(gap_limit=gap_limit, count=count, mean_length=mean_length)
