"""异常类统一导出入口（支持按模块分组导入）"""

# ====================== 1. 导入所有异常类 ======================
# 配置解析异常
from .parse_exceptions import (
    ParseBaseError,
    MissingRequiredFieldError,
    InvalidTypeError,
    ParseFileNotFoundError,
    InvalidValueError
)

# 聊天记录导入异常
from .import_exceptions import (
    ChatImportError,
    InvalidTimestampError,
    ExportReadError
)

# 分析流程异常
from .stat_exception import (
    AnalyzerBaseException,
    HashDigestError,
    UnknownStrategyError
)

# ====================== 2. 定义分组（按模块归类） ======================
PARSE_EXCEPTIONS = (
    ParseBaseError,
    MissingRequiredFieldError,
    InvalidTypeError,
    ParseFileNotFoundError,
    InvalidValueError
)

IMPORT_EXCEPTIONS = (
    ChatImportError,
    InvalidTimestampError,
    ExportReadError
)

ANALYZER_EXCEPTIONS = (
    AnalyzerBaseException,
    HashDigestError,
    UnknownStrategyError
)

__all__ = [e.__name__ for e in PARSE_EXCEPTIONS + IMPORT_EXCEPTIONS + ANALYZER_EXCEPTIONS] + [
    "PARSE_EXCEPTIONS", "IMPORT_EXCEPTIONS", "ANALYZER_EXCEPTIONS"
]
