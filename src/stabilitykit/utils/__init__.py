# Utilities for stabilitykit
from .config import ApiServer, ClientConfig, load_config
from .logging import get_logger, setup_logging

__all__ = ["ApiServer", "ClientConfig", "load_config", "get_logger", "setup_logging"]
