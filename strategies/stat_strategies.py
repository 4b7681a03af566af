from abc import ABC, abstractmethod
from typing import Any, List

from chat_analyzer.analyzer_models import AliasRegistry, Message


class StatStrategy(ABC):
    """统计策略抽象接口类（所有策略的基类）"""

    # 策略名称（对应 stat_config.enabled_stats 中的取值）
    name: str = ""

    @abstractmethod
    def compute(self, messages: List[Message], aliases: AliasRegistry) -> Any:
        """
        基于清洗后的消息列表与别名表计算统计结果
        两个入参均只读
        """
        pass
