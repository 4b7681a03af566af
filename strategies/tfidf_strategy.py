import logging
import math
from typing import Dict, List, Set

from chat_analyzer.analyzer_enums import StatType
from chat_analyzer.analyzer_models import AliasRegistry, Message, TfidfTable
from .stat_strategies import StatStrategy

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


def calc_tfidf(messages: List[Message]) -> TfidfTable:
    """
    以“身份”为文档计算TF-IDF
    tf = 该身份全部消息中词的出现次数；df = 使用过该词的身份数
    仅保留 df > 1 的词（只有一个人说过的多半不是正常词汇）
    """
    tf: Dict[str, Dict[str, int]] = {}
    df: Dict[str, Set[str]] = {}

    for message in messages:
        counts = tf.setdefault(message.id, {})
        for token in message.tokens:
            counts[token.value] = counts.get(token.value, 0) + 1
        # 同一条消息内重复的词只计一次文档频率
        for word in {token.value for token in message.tokens}:
            df.setdefault(word, set()).add(message.id)

    total_ids = len(tf)
    tfidf: TfidfTable = {}
    for identity, counts in tf.items():
        total_words = sum(counts.values())
        if total_words == 0:
            continue
        scores = tfidf.setdefault(identity, {})
        for word, count in counts.items():
            if len(df[word]) > 1:
                scores[word] = count / total_words * math.log(total_ids / (len(df[word]) + 1))

    return tfidf


def top_terms(tfidf: TfidfTable, identity: str, n: int = DEFAULT_TOP_N) -> List[str]:
    """某身份分数最高的前n个词（同分保持原有顺序）"""
    scores = tfidf.get(identity, {})
    return [word for word, _ in sorted(scores.items(), key=lambda item: item[1], reverse=True)[:n]]


class TfidfStrategy(StatStrategy):
    """区分性词汇统计策略"""

    name = StatType.TFIDF.value

    def compute(self, messages: List[Message], aliases: AliasRegistry) -> TfidfTable:
        tfidf = calc_tfidf(messages)
        logger.info(
            f"📚 TF-IDF计算完成：有分词的身份数={len(tfidf)} | "
            f"有效词条数={sum(len(scores) for scores in tfidf.values())}"
        )
        return tfidf
