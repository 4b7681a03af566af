import json
import logging
from pathlib import Path
from typing import Dict, Optional

from exceptions import ParseBaseError

# 模块级日志
logger = logging.getLogger(__name__)


class ConfigLoader:
    """配置加载门面类：封装路径处理、文件读取、JSON解析，对外提供统一简单接口"""

    # 默认配置文件路径
    DEFAULT_CONFIG_PATH = Path("./configs/config.json")

    @classmethod
    def load_config(cls, config_path: Optional[str] = None) -> Dict:
        """
        加载配置文件
        :param config_path: 自定义配置文件路径（可选，默认使用DEFAULT_CONFIG_PATH）
        :return: 解析后的配置字典
        :raise ParseBaseError: 路径/文件/格式异常时抛出统一异常
        """
        # 1. 处理配置路径（优先自定义路径，无则用默认）
        target_path = Path(config_path) if config_path else cls.DEFAULT_CONFIG_PATH
        target_path = target_path.resolve()
        logger.info(f"开始加载配置文件，目标路径：{target_path}")

        try:
            # 2. 检查文件是否存在
            if not target_path.exists():
                raise FileNotFoundError(f"配置文件不存在：{target_path}")

            # 3. 读取并解析JSON
            with open(target_path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)

            logger.info(f"✅ 配置文件加载成功（路径：{target_path}）")
            return config_dict

        except FileNotFoundError as e:
            raise ParseBaseError(f"配置文件加载失败：文件不存在 → {e}") from e
        except json.JSONDecodeError as e:
            raise ParseBaseError(f"配置文件加载失败：JSON格式错误 → {e}") from e
        except PermissionError as e:
            raise ParseBaseError(f"配置文件加载失败：无读取权限 → {e}") from e
        except OSError as e:
            raise ParseBaseError(f"配置文件加载失败：读取异常 → {e}") from e
