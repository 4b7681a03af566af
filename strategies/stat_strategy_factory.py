import logging
from typing import Type

from exceptions import UnknownStrategyError
from .interaction_strategy import InteractionStrategy
from .stat_strategies import StatStrategy
from .tfidf_strategy import TfidfStrategy

# 模块级日志
logger = logging.getLogger(__name__)


class StatStrategyFactory:
    """统计策略工厂类：统一创建不同类型的策略实例"""

    # 策略类型映射表：key=统计名称，value=对应的策略类
    _STRATEGY_MAP = {
        InteractionStrategy.name: InteractionStrategy,
        TfidfStrategy.name: TfidfStrategy,
    }

    @classmethod
    def supported(cls) -> list:
        return list(cls._STRATEGY_MAP.keys())

    @classmethod
    def create_strategy(cls, stat_name: str, **kwargs) -> StatStrategy:
        """
        工厂核心方法：创建指定类型的策略实例
        :param stat_name: 统计名称（如 "interaction"）
        :param kwargs: 传递给策略类的初始化参数
        :raise UnknownStrategyError: 不支持的策略类型时抛出
        """
        if stat_name not in cls._STRATEGY_MAP:
            raise UnknownStrategyError(stat_name, cls.supported())

        strategy_class: Type[StatStrategy] = cls._STRATEGY_MAP[stat_name]
        strategy_instance = strategy_class(**kwargs)
        logger.info(f"✅ 成功创建[{stat_name}]策略实例（类名：{strategy_class.__name__}）")
        return strategy_instance
