import logging
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

# Locations relative to the dotfiles checkout
MCP_CONFIG_RELPATH = Path("config") / "mcp" / "servers.json"
CLAUDE_CONFIG_RELPATH = Path("config") / "claude" / "settings.json"

LOG_FORMATS = ("standard", "json")


class Settings(BaseSettings):
    """Generator settings"""

    # Root of the dotfiles checkout holding config/mcp and config/claude
    DOTFILES_ROOT: Path = Field(default_factory=Path.cwd)

    # Explicit overrides for the individual files
    MCP_CONFIG_PATH: Optional[Path] = None
    CLAUDE_CONFIG_PATH: Optional[Path] = None

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "standard"

    @property
    def source_path(self) -> Path:
        """Generic MCP server config that is read."""
        return self.MCP_CONFIG_PATH or self.DOTFILES_ROOT / MCP_CONFIG_RELPATH

    @property
    def target_path(self) -> Path:
        """Claude CLI settings file that is written."""
        return self.CLAUDE_CONFIG_PATH or self.DOTFILES_ROOT / CLAUDE_CONFIG_RELPATH

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()


def validate_settings(
    settings: Settings,
    source: Optional[Path] = None,
    target: Optional[Path] = None,
) -> list[str]:
    """
    Check settings for values that will not behave as expected.

    Args:
        settings: Settings to check
        source: Source path actually used, if overridden (defaults to settings.source_path)
        target: Target path actually used, if overridden (defaults to settings.target_path)

    Returns:
        List of warning messages (empty if everything looks fine)
    """
    warnings = []

    if not isinstance(getattr(logging, settings.LOG_LEVEL.upper(), None), int):
        warnings.append(f"LOG_LEVEL '{settings.LOG_LEVEL}' is not a valid level, using INFO")

    if settings.LOG_FORMAT.lower() not in LOG_FORMATS:
        warnings.append(
            f"LOG_FORMAT '{settings.LOG_FORMAT}' is not one of {', '.join(LOG_FORMATS)}, using standard"
        )

    source = Path(source or settings.source_path)
    target = Path(target or settings.target_path)
    if source.resolve() == target.resolve():
        warnings.append(
            f"Source and target both point to {source.resolve()}; "
            "the source will be overwritten"
        )

    return warnings
