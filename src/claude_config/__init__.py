"""Generate the Claude CLI settings file from a generic MCP server config."""
from .core.errors import ConfigGenerationError, FileReadError, FileWriteError, ParseError
from .generator import GenerateResult, generate, load_source, merge_config, render_config, write_config
from .schemas import CLAUDE_SETTINGS, ClaudeSettings, Permissions

__version__ = "1.0.0"

__all__ = [
    "CLAUDE_SETTINGS",
    "ClaudeSettings",
    "Permissions",
    "GenerateResult",
    "generate",
    "load_source",
    "merge_config",
    "render_config",
    "write_config",
    "ConfigGenerationError",
    "FileReadError",
    "FileWriteError",
    "ParseError",
]
