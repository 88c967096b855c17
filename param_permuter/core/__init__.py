"""
Core functionality for Param Permuter
"""

from .config import GenerationConfig, Settings, get_settings
from .exceptions import ConfigurationError, ParamPermuterError, ProcessingError
from .logger import configure_logging, get_logger

__all__ = [
    "GenerationConfig",
    "Settings",
    "get_settings",
    "ConfigurationError",
    "ParamPermuterError",
    "ProcessingError",
    "configure_logging",
    "get_logger",
]
