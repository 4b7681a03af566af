from dataclasses import dataclass, field
from typing import List


# ------------------------------
# 输入配置
# ------------------------------
@dataclass
class InputConfig:
    export_path: str                # 聊天记录导出文件路径
    encoding: str = "utf-8"         # 导出文件编码
    strict_timestamps: bool = False  # 消息头时间非法时直接终止（默认仅拒绝该条消息）


# ------------------------------
# 机器人/黑名单配置
# ------------------------------
@dataclass
class BotConfig:
    interactive_bot_ids: List[str] = field(default_factory=list)      # 交互式机器人（连同指令消息一起移除）
    non_interactive_bot_ids: List[str] = field(default_factory=list)  # 非交互式机器人
    extra_blacklist_digests: List[str] = field(default_factory=list)  # 追加的黑名单摘要


# ------------------------------
# 互动关系配置
# ------------------------------
@dataclass
class InteractionConfig:
    session_gaps: List[int] = field(default_factory=lambda: [30, 30 * 60])  # 会话切分间隔（秒）
    edge_threshold: float = 1  # 原始权重需大于该值才保留


# ------------------------------
# TF-IDF配置
# ------------------------------
@dataclass
class TfidfConfig:
    top_n: int = 10  # 每个身份输出的词数


# ------------------------------
# 统计开关配置
# ------------------------------
@dataclass
class StatConfig:
    enabled_stats: List[str] = field(default_factory=lambda: ["interaction", "tfidf"])


# ------------------------------
# 输出配置
# ------------------------------
@dataclass
class OutputConfig:
    export_path: str = "./output/"  # 结果输出目录


# ------------------------------
# 应用总配置（整合所有子配置）
# ------------------------------
@dataclass
class AppConfig:
    input_config: InputConfig
    bot_config: BotConfig = field(default_factory=BotConfig)
    interaction_config: InteractionConfig = field(default_factory=InteractionConfig)
    tfidf_config: TfidfConfig = field(default_factory=TfidfConfig)
    stat_config: StatConfig = field(default_factory=StatConfig)
    output_config: OutputConfig = field(default_factory=OutputConfig)
