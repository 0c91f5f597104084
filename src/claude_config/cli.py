"""
generate-claude-config — build the Claude CLI settings file.

Usage:
    generate-claude-config
    generate-claude-config --source config/mcp/servers.json --target config/claude/settings.json
    python -m claude_config --log-level DEBUG

Paths default to MCP_CONFIG_PATH / CLAUDE_CONFIG_PATH, or to
config/mcp/servers.json and config/claude/settings.json under DOTFILES_ROOT.

Exit codes: 0=success, 1=error
"""
import argparse
import sys
from pathlib import Path
from typing import Optional

from .core.config import get_settings, validate_settings
from .core.errors import ConfigGenerationError
from .core.logging import get_logger, setup_logging
from .generator import generate

logger = get_logger(__name__)


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-claude-config",
        description="Generate the Claude CLI config from the generic MCP config",
    )
    parser.add_argument("--source", type=Path, help="Generic MCP config to read")
    parser.add_argument("--target", type=Path, help="Claude settings file to write")
    parser.add_argument("--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)")
    return parser


def run(argv: Optional[list] = None) -> int:
    """Generate the config and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    source = args.source or settings.source_path
    target = args.target or settings.target_path

    setup_logging(args.log_level or settings.LOG_LEVEL, settings.LOG_FORMAT)
    for warning in validate_settings(settings, source=source, target=target):
        logger.warning(warning)

    try:
        result = generate(source, target)
    except ConfigGenerationError as exc:
        logger.debug("Generation failed for %s", exc.path, exc_info=True)
        eprint(f"❌ Failed to generate Claude config: {exc}")
        return 1

    print("✅ Generated Claude CLI config from generic MCP config")
    print(f"📁 Source: {result.source.resolve()}")
    print(f"📁 Target: {result.target.resolve()}")
    return 0


def main() -> None:
    """Console entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
