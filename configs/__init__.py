# 让外部可直接 from configs import ConfigParser, AppConfig
from configs.parser import ConfigParser
from configs.config_models import (
    AppConfig, InputConfig, BotConfig, InteractionConfig,
    TfidfConfig, StatConfig, OutputConfig
)

__all__ = [
    "ConfigParser", "AppConfig", "InputConfig", "BotConfig",
    "InteractionConfig", "TfidfConfig", "StatConfig", "OutputConfig"
]
