"""
Core module initialization.
"""
from .config import Settings, get_settings
from .log_config import setup_logging

__all__ = ["Settings", "get_settings", "setup_logging"]
