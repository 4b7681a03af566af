import re
from typing import Optional

from chat_analyzer.analyzer_models import ChatHeader

# 消息头：`YYYY-MM-DD H:MM:SS 昵称(QQ号)` 或 `YYYY-MM-DD H:MM:SS 昵称<邮箱>`
# 数字仅限ASCII；昵称不能跨行（含 \u2028/\u2029）
HEADER_PATTERN = re.compile(
    r"(\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}:\d{2}) ([^\r\n\u2028\u2029]*)(\((\d+)\)|<([^<>]+)>)",
    re.ASCII
)


def parse_header(line: str) -> Optional[ChatHeader]:
    """
    解析消息头
    :param line: 一行文本
    :return: ChatHeader；不是消息头时返回None（由调用方作为正文处理）
    """
    match = HEADER_PATTERN.fullmatch(line)
    if match is None:
        return None

    time, name, _, qq, email = match.groups()
    return ChatHeader(time=time, name=name, id=qq or email)
