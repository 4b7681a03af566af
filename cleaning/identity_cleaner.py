import logging
from typing import Iterable, List

from chat_analyzer.alias_utils import copy_aliases
from chat_analyzer.analyzer_models import AliasRegistry, CleanResult, Message
from .blacklist import is_blacklisted

logger = logging.getLogger(__name__)


def remove_id(messages: List[Message], id_to_remove: str, remove_parent: bool = False) -> List[Message]:
    """
    移除某个身份的全部消息（返回新列表）
    :param messages: 按时间排序的消息列表
    :param id_to_remove: 要移除的身份
    :param remove_parent: 是否同时移除每条消息之前最近一条未被移除的消息（机器人指令）
    """
    to_remove = [False] * len(messages)

    for i, message in enumerate(messages):
        if message.id != id_to_remove:
            continue
        to_remove[i] = True
        if remove_parent:
            # 跳过已标记的消息（机器人回复可能有延迟，连续多条）
            j = i - 1
            while j >= 0 and to_remove[j]:
                j -= 1
            if j >= 0:
                to_remove[j] = True

    return [message for message, removed in zip(messages, to_remove) if not removed]


async def clean(
        messages: List[Message],
        aliases: AliasRegistry,
        interactive_bot_ids: Iterable[str] = (),
        non_interactive_bot_ids: Iterable[str] = (),
        extra_blacklist: Iterable[str] = ()
) -> CleanResult:
    """
    身份清洗：黑名单 → 交互式机器人（连同指令消息）→ 非交互式机器人
    输入的消息列表与别名表不会被修改
    """
    aliases = copy_aliases(aliases)
    messages = list(messages)
    extra_blacklist = list(extra_blacklist)
    removed_ids: List[str] = []
    total_before = len(messages)

    # 1. 黑名单（遍历快照，循环内会删除）
    for identity in list(aliases):
        if await is_blacklisted(identity, extra_blacklist):
            messages = remove_id(messages, identity, remove_parent=False)
            del aliases[identity]
            removed_ids.append(identity)
            logger.info("🧹 已移除黑名单身份的全部消息（摘要命中）")

    # 2. 交互式机器人：连同触发它的上一条消息一起移除
    for identity in interactive_bot_ids:
        messages = remove_id(messages, identity, remove_parent=True)
        if aliases.pop(identity, None) is not None:
            removed_ids.append(identity)
        logger.info(f"🧹 已移除交互式机器人[{identity}]及其指令消息")

    # 3. 非交互式机器人
    for identity in non_interactive_bot_ids:
        messages = remove_id(messages, identity, remove_parent=False)
        if aliases.pop(identity, None) is not None:
            removed_ids.append(identity)
        logger.info(f"🧹 已移除非交互式机器人[{identity}]")

    logger.info(
        f"🧹 【身份清洗汇总】清洗前消息数：{total_before} | "
        f"清洗后消息数：{len(messages)} | "
        f"移除身份数：{len(removed_ids)} | "
        f"剩余身份数：{len(aliases)}"
    )
    return CleanResult(messages=messages, aliases=aliases, removed_ids=removed_ids)
