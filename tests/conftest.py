"""
Pytest configuration and fixtures for the generator tests
"""
import json
import logging
import sys
from pathlib import Path

import pytest

# Add src to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


ENV_VARS = ("DOTFILES_ROOT", "MCP_CONFIG_PATH", "CLAUDE_CONFIG_PATH", "LOG_LEVEL", "LOG_FORMAT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def dotfiles(tmp_path):
    """Dotfiles checkout with a generic MCP config and an empty claude dir."""
    mcp_dir = tmp_path / "config" / "mcp"
    mcp_dir.mkdir(parents=True)
    (tmp_path / "config" / "claude").mkdir(parents=True)

    source = mcp_dir / "servers.json"
    source.write_text(json.dumps({
        "mcpServers": {
            "filesystem": {
                "command": "npx",
                "args": ["-y", "@modelcontextprotocol/server-filesystem", "/tmp"]
            },
            "fetch": {
                "command": "uvx",
                "args": ["mcp-server-fetch"]
            }
        }
    }), encoding="utf-8")
    return tmp_path
