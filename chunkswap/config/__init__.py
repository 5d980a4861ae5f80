from .app_config import AppConfig
from .log_config import LogConfig
from .swap_config import SwapConfig

__all__ = ["AppConfig", "LogConfig", "SwapConfig"]
