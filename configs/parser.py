import logging
import os
from typing import Dict, List

# 导入结构化配置类
from configs.config_models import (
    InputConfig, BotConfig, InteractionConfig, TfidfConfig,
    StatConfig, OutputConfig, AppConfig
)
from chat_analyzer.analyzer_enums import StatType
from exceptions import (
    MissingRequiredFieldError,
    InvalidTypeError,
    ParseFileNotFoundError,
    InvalidValueError
)

logger = logging.getLogger(__name__)


# ------------------------------
# 配置解析器（核心：校验+转换配置）
# ------------------------------
class ConfigParser:
    """配置解析器：校验合法性 + 转换为结构化配置"""

    @staticmethod
    def parse(config_dict: Dict) -> AppConfig:
        """主解析方法：将原始JSON字典转换为结构化AppConfig"""
        if not isinstance(config_dict, dict):
            raise InvalidTypeError("配置文件顶层必须是JSON对象")

        input_cfg = ConfigParser._parse_input_config(config_dict.get("input_config", {}))
        bot_cfg = ConfigParser._parse_bot_config(config_dict.get("bot_config", {}))
        interaction_cfg = ConfigParser._parse_interaction_config(config_dict.get("interaction_config", {}))
        tfidf_cfg = ConfigParser._parse_tfidf_config(config_dict.get("tfidf_config", {}))
        stat_cfg = ConfigParser._parse_stat_config(config_dict.get("stat_config", {}))
        output_cfg = ConfigParser._parse_output_config(config_dict.get("output_config", {}))

        return AppConfig(
            input_config=input_cfg,
            bot_config=bot_cfg,
            interaction_config=interaction_cfg,
            tfidf_config=tfidf_cfg,
            stat_config=stat_cfg,
            output_config=output_cfg
        )

    @staticmethod
    def _parse_input_config(input_config_dict: Dict) -> InputConfig:
        """校验输入配置（导出文件路径、编码、时间严格模式）"""
        # ========== 1. 导出文件路径 ==========
        export_path = input_config_dict.get("export_path")
        # 1.1 非空校验
        if not export_path:
            raise MissingRequiredFieldError("input_config.export_path 为必填项，不能为空（聊天记录导出文件路径）")
        # 1.2 类型校验
        if not isinstance(export_path, str):
            raise InvalidTypeError("input_config.export_path 必须是字符串类型")
        # 1.3 文件存在性校验
        if not os.path.exists(export_path):
            raise ParseFileNotFoundError(f"聊天记录导出文件不存在：{export_path}（请检查路径是否正确）")

        # ========== 2. 编码 ==========
        encoding = input_config_dict.get("encoding", "utf-8")
        if not isinstance(encoding, str) or not encoding.strip():
            raise InvalidTypeError("input_config.encoding 必须是非空字符串")

        # ========== 3. 时间严格模式 ==========
        strict_timestamps = input_config_dict.get("strict_timestamps", False)
        if not isinstance(strict_timestamps, bool):
            raise InvalidTypeError("input_config.strict_timestamps 必须是布尔值（true/false）")

        return InputConfig(
            export_path=export_path,
            encoding=encoding.strip(),
            strict_timestamps=strict_timestamps
        )

    @staticmethod
    def _parse_id_list(value, field_name: str) -> List[str]:
        """校验字符串列表：去除首尾空白，丢弃空字符串"""
        if value is None:
            return []
        if not isinstance(value, list):
            raise InvalidTypeError(f"{field_name} 必须为列表类型")

        invalid_elements = [f"索引{idx}" for idx, val in enumerate(value) if not isinstance(val, str)]
        if invalid_elements:
            raise InvalidTypeError(f"{field_name} 列表中所有元素必须是字符串，无效元素：{', '.join(invalid_elements)}")

        return [val.strip() for val in value if val.strip()]

    @staticmethod
    def _parse_bot_config(bot_config_dict: Dict) -> BotConfig:
        """解析机器人与追加黑名单配置（均可选）"""
        return BotConfig(
            interactive_bot_ids=ConfigParser._parse_id_list(
                bot_config_dict.get("interactive_bot_ids"), "bot_config.interactive_bot_ids"),
            non_interactive_bot_ids=ConfigParser._parse_id_list(
                bot_config_dict.get("non_interactive_bot_ids"), "bot_config.non_interactive_bot_ids"),
            extra_blacklist_digests=ConfigParser._parse_id_list(
                bot_config_dict.get("extra_blacklist_digests"), "bot_config.extra_blacklist_digests")
        )

    @staticmethod
    def _parse_interaction_config(interaction_config_dict: Dict) -> InteractionConfig:
        """解析互动关系配置"""
        # 1. 会话间隔：正整数列表
        session_gaps = interaction_config_dict.get("session_gaps", [30, 30 * 60])
        if not isinstance(session_gaps, list) or len(session_gaps) == 0:
            raise InvalidValueError("interaction_config.session_gaps 必须是非空列表")
        for idx, gap in enumerate(session_gaps):
            if isinstance(gap, bool) or not isinstance(gap, int) or gap <= 0:
                raise InvalidValueError(f"interaction_config.session_gaps 索引{idx} 必须是正整数（秒），当前值：{gap}")

        # 2. 关系权重阈值：≥0 的数字
        edge_threshold = interaction_config_dict.get("edge_threshold", 1)
        if isinstance(edge_threshold, bool) or not isinstance(edge_threshold, (int, float)):
            raise InvalidTypeError("interaction_config.edge_threshold 必须是数字")
        if edge_threshold < 0:
            raise InvalidValueError("interaction_config.edge_threshold 不能小于0")

        return InteractionConfig(
            session_gaps=session_gaps,
            edge_threshold=edge_threshold
        )

    @staticmethod
    def _parse_tfidf_config(tfidf_config_dict: Dict) -> TfidfConfig:
        """解析TF-IDF配置"""
        top_n = tfidf_config_dict.get("top_n", 10)
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 1:
            raise InvalidValueError("tfidf_config.top_n 必须是 ≥1 的整数")
        return TfidfConfig(top_n=top_n)

    @staticmethod
    def _parse_stat_config(stat_config_dict: Dict) -> StatConfig:
        """解析启用的统计类型"""
        valid_stats = StatType.values()
        enabled_stats = stat_config_dict.get("enabled_stats", valid_stats)
        if not isinstance(enabled_stats, list):
            raise InvalidTypeError("stat_config.enabled_stats 必须为列表类型")
        for stat in enabled_stats:
            if stat not in valid_stats:
                raise InvalidValueError(f"stat_config.enabled_stats 包含不支持的类型：{stat}，可选值：{valid_stats}")

        # 去重并保持顺序
        return StatConfig(enabled_stats=list(dict.fromkeys(enabled_stats)))

    @staticmethod
    def _parse_output_config(output_config_dict: Dict) -> OutputConfig:
        """校验并解析输出配置"""
        export_path = output_config_dict.get("export_path", "./output/")
        if not isinstance(export_path, str):
            raise InvalidTypeError("output_config.export_path 必须是字符串类型（结果输出目录）")

        # 自动创建输出目录（不存在则创建）
        if not os.path.exists(export_path):
            os.makedirs(export_path, exist_ok=True)
            logger.info("📁 输出目录不存在，已自动创建：%s", export_path)

        return OutputConfig(export_path=export_path)
