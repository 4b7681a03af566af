from dataclasses import dataclass, field
from typing import List, Optional, TypeAlias, Dict, Any

from .analyzer_enums import TokenType


# ============ 分词结果 ============
@dataclass(frozen=True)
class Token:
    """单个分词结果（追加到消息后不再修改）"""
    type: TokenType     # bigram / english
    value: str          # 二元组为2个汉字；英文为小写单词

    def is_complete(self) -> bool:
        """二元组需满2个字符才算完整；英文单词无长度要求"""
        if self.type == TokenType.BIGRAM:
            return len(self.value) >= 2
        return True


# ============ 消息头/消息 ============
@dataclass(frozen=True)
class ChatHeader:
    """消息头解析结果：`<日期> <时间> <昵称>(<QQ号>)` 或 `<日期> <时间> <昵称><邮箱>`"""
    time: str           # 原始时间字符串 YYYY-MM-DD H:MM:SS
    name: str           # 显示昵称
    id: str             # QQ号优先，否则为邮箱


@dataclass
class Message:
    """一条消息（按输入顺序创建，不重排）"""
    time: int                   # 秒级时间戳
    id: str                     # 发送者身份
    tokens: List[Token] = field(default_factory=list)  # 后续正文行的分词结果


@dataclass(frozen=True)
class RejectedHeader:
    """时间无法解析而被拒绝的消息头"""
    line_no: int
    line: str
    reason: str


# ========== TypeAlias（语义化命名，便于复用） ==========
# 别名表：{身份: {昵称: 出现次数}}（内层保持首次出现顺序）
AliasRegistry: TypeAlias = Dict[str, Dict[str, int]]
# 会话：连续消息片段
Session: TypeAlias = List[Message]
# TF-IDF表：{身份: {词: 分数}}
TfidfTable: TypeAlias = Dict[str, Dict[str, float]]


# ============ 各阶段输出 ============
@dataclass
class AssembleResult:
    """消息组装结果"""
    messages: List[Message]
    aliases: AliasRegistry
    rejected_headers: List[RejectedHeader] = field(default_factory=list)


@dataclass
class CleanResult:
    """身份清洗结果（与组装结果互不共享可变对象）"""
    messages: List[Message]
    aliases: AliasRegistry
    removed_ids: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SessionSummary:
    """会话切分概览"""
    gap_limit: int
    count: int
    mean_length: float


@dataclass
class AnalyzerResult:
    """聚合后的最终分析结果"""
    message_count: int
    representative_alias: Dict[str, str]
    ranked_ids: List[str]
    rejected_headers: List[RejectedHeader] = field(default_factory=list)
    session_summaries: List[SessionSummary] = field(default_factory=list)
    interaction_graph: Optional[Dict[str, Any]] = None      # node-link 格式
    graph_summary: Optional[Dict[str, Any]] = None          # 节点数、边数、密度、加权度
    tfidf: Optional[TfidfTable] = None
    top_terms: Dict[str, List[str]] = field(default_factory=dict)
