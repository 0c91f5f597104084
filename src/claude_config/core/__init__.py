"""Core modules for the Claude config generator."""
from .config import Settings, get_settings, validate_settings
from .errors import ConfigGenerationError, FileReadError, FileWriteError, ParseError
from .logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "validate_settings",
    "ConfigGenerationError",
    "FileReadError",
    "FileWriteError",
    "ParseError",
    "get_logger",
    "setup_logging",
]
