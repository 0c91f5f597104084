"""
Claude config generator - merge the generic MCP config with Claude settings.

The generic config (usually config/mcp/servers.json) is the single source of
truth for MCP servers. Its top-level keys are copied verbatim and the Claude
settings are layered on top; settings always win on a key collision.
"""
from __future__ import annotations

import copy
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .core.errors import FileReadError, FileWriteError, ParseError
from .core.logging import get_logger
from .schemas import CLAUDE_SETTINGS, ClaudeSettings

logger = get_logger(__name__)

PathLike = Union[str, Path]
SettingsLike = Union[ClaudeSettings, Mapping[str, Any]]


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of a successful generate() call."""
    source: Path
    target: Path
    config: Dict[str, Any]


def _settings_dict(settings: SettingsLike) -> Dict[str, Any]:
    if isinstance(settings, ClaudeSettings):
        return settings.as_dict()
    return copy.deepcopy(dict(settings))


def merge_config(source: Mapping[str, Any], settings: SettingsLike = CLAUDE_SETTINGS) -> Dict[str, Any]:
    """
    Shallow-merge the source config with the Claude settings.

    Neither argument is modified. Source key order is kept; keys that only
    exist in the settings are appended in their declared order.

    Args:
        source: Parsed generic MCP config
        settings: Settings layered on top of the source

    Returns:
        New dict with every source key plus every settings key
    """
    if not isinstance(source, Mapping):
        raise TypeError(f"source must be a mapping, got {type(source).__name__}")

    merged = dict(source)
    for key, value in _settings_dict(settings).items():
        if key in merged:
            logger.debug("Claude setting '%s' overrides the value from the MCP config", key)
        merged[key] = value

    return merged


def render_config(config: Mapping[str, Any]) -> str:
    """Serialize with 2-space indentation and a trailing newline."""
    return json.dumps(config, indent=2, ensure_ascii=False, allow_nan=False) + "\n"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number {text} is out of range")
    return value


def load_source(source_path: PathLike) -> Dict[str, Any]:
    """
    Read and parse the generic MCP config.

    Raises:
        FileReadError: The file is missing or unreadable
        ParseError: The file is not valid JSON or not a JSON object
    """
    path = Path(source_path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, f"Could not read {path}: {exc}") from exc

    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except ValueError as exc:
        raise ParseError(path, f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError(path, f"Expected a JSON object in {path}, got {type(data).__name__}")

    if "mcpServers" not in data:
        logger.warning("%s has no 'mcpServers' section", path)

    return data


def write_config(target_path: PathLike, text: str) -> None:
    """
    Overwrite the target file with text.

    Raises:
        FileWriteError: The target (or its parent directory) is not writable
    """
    path = Path(target_path)

    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(path, f"Could not write {path}: {exc}") from exc


def generate(
    source_path: PathLike,
    target_path: PathLike,
    settings: SettingsLike = CLAUDE_SETTINGS,
) -> GenerateResult:
    """
    Generate the Claude CLI config from the generic MCP config.

    Never exits the process; failures surface as ConfigGenerationError
    subclasses so the caller decides how to report them.

    Args:
        source_path: Generic MCP config to read
        target_path: Claude settings file to (over)write
        settings: Settings layered on top of the source

    Returns:
        GenerateResult with the resolved paths and the merged config
    """
    source = Path(source_path)
    target = Path(target_path)

    logger.info("Reading MCP config from %s", source)
    mcp_config = load_source(source)

    claude_config = merge_config(mcp_config, settings)
    write_config(target, render_config(claude_config))

    servers = claude_config.get("mcpServers")
    logger.info(
        "Wrote %s (%d MCP servers)",
        target,
        len(servers) if isinstance(servers, dict) else 0,
    )

    return GenerateResult(source=source, target=target, config=claude_config)
