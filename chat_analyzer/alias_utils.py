from typing import Dict, List

from .analyzer_models import AliasRegistry


def get_representative_alias(aliases: AliasRegistry) -> Dict[str, str]:
    """每个身份出现次数最多的昵称（次数相同时取先出现的）"""
    representative = {}
    for identity, name_counts in aliases.items():
        if not name_counts:
            continue
        # sorted 是稳定排序，同次数保留首次出现顺序
        representative[identity] = sorted(name_counts.items(), key=lambda item: item[1], reverse=True)[0][0]
    return representative


def get_ids_by_message_count(aliases: AliasRegistry) -> List[str]:
    """按消息总数（各昵称出现次数之和）降序排列的身份列表"""
    totals = [(identity, sum(name_counts.values())) for identity, name_counts in aliases.items()]
    return [identity for identity, _ in sorted(totals, key=lambda item: item[1], reverse=True)]


def copy_aliases(aliases: AliasRegistry) -> AliasRegistry:
    """复制别名表（内层字典也复制，避免跨阶段共享）"""
    return {identity: dict(name_counts) for identity, name_counts in aliases.items()}
