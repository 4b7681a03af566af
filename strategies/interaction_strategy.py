"""互动关系：两种时间尺度的会话内参与度乘积累加，归一化后输出关系图。"""
import logging
from typing import Any, Dict, List, Sequence

import networkx as nx

from chat_analyzer.analyzer_enums import StatType
from chat_analyzer.analyzer_models import AliasRegistry, Message
from .session_detector import detect_sessions
from .stat_strategies import StatStrategy

logger = logging.getLogger(__name__)

# 短会话30秒、长会话30分钟
DEFAULT_SESSION_GAPS = (30, 30 * 60)
# 原始权重不超过该值的关系视为噪声
DEFAULT_EDGE_THRESHOLD = 1


class InteractionGraph:
    """互动关系图（基于 networkx.Graph，节点为身份，边权重归一化到 (0, 1]）"""

    def __init__(self, graph: nx.Graph):
        self.graph = graph

    def to_node_link(self) -> Dict[str, List[Dict[str, Any]]]:
        """渲染层使用的 node-link 结构：{nodes: [{id, group}], links: [{source, target, value}]}"""
        return {
            "nodes": [{"id": node, "group": data["group"]} for node, data in self.graph.nodes(data=True)],
            "links": [
                {"source": min(u, v), "target": max(u, v), "value": data["value"]}
                for u, v, data in self.graph.edges(data=True)
            ],
        }

    def summary(self) -> Dict[str, Any]:
        """节点数、边数、密度、加权度"""
        return {
            "node_count": self.graph.number_of_nodes(),
            "edge_count": self.graph.number_of_edges(),
            "density": nx.density(self.graph) if self.graph.number_of_nodes() > 1 else 0.0,
            "weighted_degree": dict(self.graph.degree(weight="value")),
        }


def accumulate_pair_weights(messages: List[Message], session_gaps: Sequence[int]) -> Dict[str, Dict[str, float]]:
    """
    逐会话累加两两参与度乘积
    :return: {较小的身份: {较大的身份: 累计权重}}
    """
    links: Dict[str, Dict[str, float]] = {}

    for session_gap in session_gaps:
        for session in detect_sessions(messages, session_gap):
            shares: Dict[str, float] = {}
            for message in session:
                shares[message.id] = shares.get(message.id, 0) + 1
            for identity in shares:
                shares[identity] /= len(session)

            for a in shares:
                for b in shares:
                    if a < b:
                        inner = links.setdefault(a, {})
                        inner[b] = inner.get(b, 0) + shares[a] * shares[b]

    return links


class InteractionStrategy(StatStrategy):
    """互动关系统计策略"""

    name = StatType.INTERACTION.value

    def __init__(self, session_gaps: Sequence[int] = DEFAULT_SESSION_GAPS, edge_threshold: float = DEFAULT_EDGE_THRESHOLD):
        self.session_gaps = tuple(session_gaps)
        self.edge_threshold = edge_threshold

    def compute(self, messages: List[Message], aliases: AliasRegistry) -> InteractionGraph:
        links = accumulate_pair_weights(messages, self.session_gaps)

        # 过滤弱关系
        kept = [
            (a, b, value)
            for a, inner in links.items()
            for b, value in inner.items()
            if value > self.edge_threshold
        ]

        graph = nx.Graph()
        # 所有剩余身份都是节点（包括孤立节点）
        for group, identity in enumerate(aliases):
            graph.add_node(identity, group=group)

        if kept:
            maximum_value = max(value for _, _, value in kept)
            for a, b, value in kept:
                graph.add_edge(a, b, value=value / maximum_value)

        logger.info(
            f"🕸️ 互动关系计算完成：会话间隔={list(self.session_gaps)} | "
            f"候选关系数={sum(len(inner) for inner in links.values())} | "
            f"保留关系数={len(kept)} | "
            f"节点数={graph.number_of_nodes()}"
        )
        return InteractionGraph(graph)
