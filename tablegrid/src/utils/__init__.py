from .config_loader import load_config, load_table_config
from .logger import get_logger

__all__ = ["load_config", "load_table_config", "get_logger"]
