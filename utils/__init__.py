from .config_loader import ConfigLoader
from .export_reader import read_export_text

__all__ = [
    "ConfigLoader", "read_export_text"
]
