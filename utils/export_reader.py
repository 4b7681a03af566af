import logging
from pathlib import Path

from exceptions import ExportReadError

logger = logging.getLogger(__name__)


def read_export_text(export_path: str, encoding: str = "utf-8") -> str:
    """读取聊天记录导出文本（保留原始换行，交给消息组装按 \\r?\\n 切分）"""
    path = Path(export_path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ExportReadError(str(path), "文件不存在") from e
    except UnicodeDecodeError as e:
        raise ExportReadError(str(path), f"编码不是{encoding}") from e
    except LookupError as e:
        raise ExportReadError(str(path), f"未知编码：{encoding}") from e
    except OSError as e:
        raise ExportReadError(str(path), str(e)) from e

    logger.info(f"📖 导出文件读取完成：{path}（{len(text)}个字符）")
    return text
