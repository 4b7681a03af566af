import dataclasses
import json
from enum import Enum
from typing import Any


class DataConverterFacade:
    """数据转换门面类：任意dataclass/字典/列表 → JSON"""

    @staticmethod
    def _to_dict(obj: Any) -> Any:
        """内部递归转换方法（通过类型特征判断，不依赖具体类）"""
        # 处理dataclass对象
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {
                field.name: DataConverterFacade._to_dict(getattr(obj, field.name))
                for field in dataclasses.fields(obj)
            }
        # 处理枚举类型（元组值取名称部分）
        elif isinstance(obj, Enum):
            return obj.value[1] if isinstance(obj.value, tuple) else obj.value
        # 处理字典
        elif isinstance(obj, dict):
            return {key: DataConverterFacade._to_dict(value) for key, value in obj.items()}
        # 处理列表/元组等可迭代对象
        elif isinstance(obj, (list, tuple, set)):
            return [DataConverterFacade._to_dict(item) for item in obj]
        # 基本类型直接返回
        else:
            return obj

    @classmethod
    def to_dict(cls, data: Any) -> Any:
        return cls._to_dict(data)

    @classmethod
    def to_json(cls, data: Any, indent: int = 2) -> str:
        """转换为JSON字符串（中文不转义）"""
        return json.dumps(cls._to_dict(data), ensure_ascii=False, indent=indent)

    @classmethod
    def save_json(cls, data: Any, file_path: str, indent: int = 2) -> None:
        """将JSON保存到文件"""
        json_str = cls.to_json(data, indent)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(json_str)
