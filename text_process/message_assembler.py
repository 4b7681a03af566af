import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

from chat_analyzer.analyzer_models import AliasRegistry, AssembleResult, Message, RejectedHeader
from exceptions import InvalidTimestampError
from .header_parser import parse_header
from .tokenizer import string_to_tokens

logger = logging.getLogger(__name__)

HEADER_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LINE_SPLIT_PATTERN = re.compile(r"\r?\n")


def parse_timestamp(time_str: str) -> int:
    """将消息头时间（按UTC解释）转换为秒级时间戳；非法日期抛ValueError"""
    return int(datetime.strptime(time_str, HEADER_TIME_FORMAT).replace(tzinfo=timezone.utc).timestamp())


def assemble(text: str, strict_timestamps: bool = False) -> AssembleResult:
    """
    单遍扫描导出文本，构建消息列表与别名表
    :param text: 完整导出文本
    :param strict_timestamps: True 时遇到无法解析的时间直接抛 InvalidTimestampError
    :return: AssembleResult（消息列表、别名表、被拒绝的消息头）
    """
    aliases: AliasRegistry = {}
    messages: List[Message] = []
    rejected: List[RejectedHeader] = []
    # 当前接收正文的消息；None 表示丢弃正文（首个消息头之前，或消息头被拒绝后）
    current: Optional[Message] = None

    for line_no, line in enumerate(LINE_SPLIT_PATTERN.split(text), 1):
        header = parse_header(line)

        if header is not None:
            try:
                timestamp = parse_timestamp(header.time)
            except ValueError as e:
                if strict_timestamps:
                    raise InvalidTimestampError(line_no, line) from e
                logger.warning(f"⚠️ 第{line_no}行消息头时间无法解析，已拒绝该消息：{line!r}（{e}）")
                rejected.append(RejectedHeader(line_no=line_no, line=line, reason=str(e)))
                current = None
                continue

            current = Message(time=timestamp, id=header.id)
            messages.append(current)
            names = aliases.setdefault(header.id, {})
            names[header.name] = names.get(header.name, 0) + 1
            continue

        if current is None:
            continue

        # 别名表此时还不完整（后出现的昵称无法去除），单遍扫描的近似处理
        current.tokens.extend(string_to_tokens(line, aliases))

    logger.info(
        f"📜 消息组装完成：消息数={len(messages)} | "
        f"身份数={len(aliases)} | "
        f"被拒绝的消息头数={len(rejected)}"
    )
    return AssembleResult(messages=messages, aliases=aliases, rejected_headers=rejected)
