"""分析流程相关业务异常"""
class AnalyzerBaseException(Exception):
    """分析流程基础异常（所有分析业务异常的父类）"""
    pass

class HashDigestError(AnalyzerBaseException):
    """黑名单摘要计算失败（无法确定是否拉黑，整个流程终止）"""
    def __init__(self, identity: str, message: str = "❌ 黑名单摘要计算失败"):
        self.identity = identity
        full_message = f"{message}：id={identity!r}"
        super().__init__(full_message)

class UnknownStrategyError(AnalyzerBaseException):
    """不支持的统计策略类型"""
    def __init__(self, stat_name: str, supported: list, message: str = "❌ 不支持的统计策略类型"):
        self.stat_name = stat_name
        self.supported = supported
        full_message = f"{message}：{stat_name}，支持类型：{supported}"
        super().__init__(full_message)
