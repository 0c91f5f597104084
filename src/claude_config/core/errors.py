"""Errors raised while generating the Claude config."""
from pathlib import Path
from typing import Union


class ConfigGenerationError(Exception):
    """Base class for every generation failure; carries the offending path."""

    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(message)
        self.path = Path(path)
        self.message = message


class FileReadError(ConfigGenerationError):
    """Source file is missing or unreadable."""


class ParseError(ConfigGenerationError):
    """Source file is not a JSON object."""


class FileWriteError(ConfigGenerationError):
    """Destination file could not be written."""
