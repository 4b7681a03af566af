from .log_config import setup_global_logging

__all__ = ["setup_global_logging"]
