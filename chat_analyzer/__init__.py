# 仅导出数据模型与工具函数；分析器请从 chat_analyzer.chat_record_analyzer 导入（避免循环导入）
from .analyzer_enums import TokenType, TokenizerState, CharClass, StatType
from .analyzer_models import (
    Token, ChatHeader, Message, RejectedHeader,
    AliasRegistry, Session, TfidfTable,
    AssembleResult, CleanResult, SessionSummary, AnalyzerResult
)
from .alias_utils import get_representative_alias, get_ids_by_message_count, copy_aliases

__all__ = [
    "TokenType", "TokenizerState", "CharClass", "StatType",
    "Token", "ChatHeader", "Message", "RejectedHeader",
    "AliasRegistry", "Session", "TfidfTable",
    "AssembleResult", "CleanResult", "SessionSummary", "AnalyzerResult",
    "get_representative_alias", "get_ids_by_message_count", "copy_aliases"
]
