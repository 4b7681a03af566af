import logging
from typing import Any, Dict, List

from chat_analyzer.alias_utils import get_ids_by_message_count, get_representative_alias
from chat_analyzer.analyzer_enums import StatType
from chat_analyzer.analyzer_models import AnalyzerResult, AssembleResult, CleanResult, SessionSummary
from cleaning import clean
from configs import AppConfig
from strategies import StatStrategyFactory, detect_sessions, summarize_sessions, top_terms
from text_process import assemble

logger = logging.getLogger(__name__)


class ChatRecordAnalyzer:
    """聊天记录分析器（核心业务类）：组装 → 清洗 → 会话 → 统计 → 聚合"""

    def __init__(
            self,
            app_config: AppConfig  # 全局配置实例（AppConfig）
    ):
        self.app_config = app_config
        # 各步骤结果缓存（后续步骤复用）
        self.assemble_result: AssembleResult | None = None
        self.clean_result: CleanResult | None = None
        self.session_summaries: List[SessionSummary] = []
        self.stat_results: Dict[str, Any] = {}

    async def run(self, text: str) -> AnalyzerResult:
        """执行入口（统一串联所有步骤）"""
        # 步骤1：组装消息
        self.assemble_result = self._assemble(text)
        # 步骤2：身份清洗
        self.clean_result = await self._clean()
        # 步骤3：会话概览
        self.session_summaries = self._summarize_sessions()
        # 步骤4：执行统计策略
        self.stat_results = self._run_strategies()
        # 步骤5：聚合分析结果
        return self._aggregate_analyzer_result()

    def _assemble(self, text: str) -> AssembleResult:
        """步骤1：解析消息头 + 分词组装消息"""
        logger.info("🎷 【步骤1/5】开始组装消息")
        return assemble(text, strict_timestamps=self.app_config.input_config.strict_timestamps)

    async def _clean(self) -> CleanResult:
        """步骤2：移除黑名单与机器人"""
        bot_config = self.app_config.bot_config
        logger.info(
            f"🎸 【步骤2/5】开始身份清洗：交互式机器人数={len(bot_config.interactive_bot_ids)} | "
            f"非交互式机器人数={len(bot_config.non_interactive_bot_ids)}"
        )
        return await clean(
            self.assemble_result.messages,
            self.assemble_result.aliases,
            interactive_bot_ids=bot_config.interactive_bot_ids,
            non_interactive_bot_ids=bot_config.non_interactive_bot_ids,
            extra_blacklist=bot_config.extra_blacklist_digests
        )

    def _summarize_sessions(self) -> List[SessionSummary]:
        """步骤3：各时间尺度下的会话数量与平均长度"""
        summaries = []
        for gap in self.app_config.interaction_config.session_gaps:
            summary = summarize_sessions(detect_sessions(self.clean_result.messages, gap), gap)
            logger.info(
                f"🎹 【步骤3/5】会话间隔{gap}秒：会话数={summary.count} | 平均长度={summary.mean_length:.2f}"
            )
            summaries.append(summary)
        return summaries

    def _strategy_kwargs(self, stat_name: str) -> Dict[str, Any]:
        if stat_name == StatType.INTERACTION.value:
            interaction_config = self.app_config.interaction_config
            return {
                "session_gaps": interaction_config.session_gaps,
                "edge_threshold": interaction_config.edge_threshold
            }
        return {}

    def _run_strategies(self) -> Dict[str, Any]:
        """步骤4：按配置创建并执行统计策略"""
        results = {}
        for stat_name in self.app_config.stat_config.enabled_stats:
            logger.info(f"🎻 【步骤4/5】开始执行统计：{stat_name}")
            strategy = StatStrategyFactory.create_strategy(stat_name, **self._strategy_kwargs(stat_name))
            results[stat_name] = strategy.compute(self.clean_result.messages, self.clean_result.aliases)
        return results

    def _aggregate_analyzer_result(self) -> AnalyzerResult:
        """步骤5：将各环节处理结果聚合为AnalyzerResult"""
        aliases = self.clean_result.aliases
        ranked_ids = get_ids_by_message_count(aliases)

        graph = self.stat_results.get(StatType.INTERACTION.value)
        tfidf = self.stat_results.get(StatType.TFIDF.value)

        top_n = self.app_config.tfidf_config.top_n
        terms = {}
        if tfidf is not None:
            terms = {identity: top_terms(tfidf, identity, top_n) for identity in ranked_ids if identity in tfidf}

        result = AnalyzerResult(
            message_count=len(self.clean_result.messages),
            representative_alias=get_representative_alias(aliases),
            ranked_ids=ranked_ids,
            rejected_headers=list(self.assemble_result.rejected_headers),
            session_summaries=list(self.session_summaries),
            interaction_graph=graph.to_node_link() if graph is not None else None,
            graph_summary=graph.summary() if graph is not None else None,
            tfidf=tfidf,
            top_terms=terms
        )
        logger.info(
            f"🪉 【步骤5/5】聚合完成：消息数={result.message_count} | "
            f"身份数={len(ranked_ids)} | "
            f"关系数={len(result.interaction_graph['links']) if graph is not None else 0}"
        )
        return result
