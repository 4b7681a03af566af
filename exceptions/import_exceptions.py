"""聊天记录导入（导出文本读取/解析）异常"""
from typing import Optional


class ChatImportError(Exception):
    """聊天记录导入异常基类（可用于批量捕获）"""
    pass

class InvalidTimestampError(ChatImportError):
    """消息头时间无法解析（格式匹配但日期/时间非法）"""
    def __init__(self, line_no: int, line: str, message: str = "❌ 消息头时间无法解析"):
        self.line_no = line_no
        self.line = line
        full_message = f"{message}（第{line_no}行：{line!r}）"
        super().__init__(full_message)

class ExportReadError(ChatImportError):
    """聊天导出文件读取失败"""
    def __init__(self, path: str, reason: Optional[str] = None, message: str = "❌ 聊天导出文件读取失败"):
        self.path = path
        full_message = f"{message}：{path}" + (f"（{reason}）" if reason else "")
        super().__init__(full_message)
