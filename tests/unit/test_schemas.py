"""Unit tests for the Claude settings model."""
import pytest
from pydantic import ValidationError

from claude_config.schemas import CLAUDE_SETTINGS, ClaudeSettings, Permissions


def test_constant_dumps_claude_keys():
    assert CLAUDE_SETTINGS.as_dict() == {
        "permissions": {"allow": ["*"], "deny": []},
        "env": {"CLAUDE_CODE_ENABLE_TELEMETRY": "1"},
        "cleanupPeriodDays": 30,
        "includeCoAuthoredBy": True,
    }


def test_constant_is_frozen():
    with pytest.raises(ValidationError):
        CLAUDE_SETTINGS.cleanup_period_days = 1


def test_as_dict_returns_fresh_copy():
    first = CLAUDE_SETTINGS.as_dict()
    first["env"]["X"] = "1"

    assert "X" not in CLAUDE_SETTINGS.as_dict()["env"]


def test_accepts_aliases():
    settings = ClaudeSettings.model_validate({
        "permissions": {"allow": ["Read"], "deny": ["Bash"]},
        "cleanupPeriodDays": 14,
        "includeCoAuthoredBy": False,
    })

    assert settings.permissions == Permissions(allow=("Read",), deny=("Bash",))
    assert settings.cleanup_period_days == 14
    assert settings.include_co_authored_by is False


def test_rejects_non_positive_cleanup_period():
    with pytest.raises(ValidationError):
        ClaudeSettings(cleanup_period_days=0)


def test_constant_env_is_read_only():
    with pytest.raises(TypeError):
        CLAUDE_SETTINGS.env["X"] = "1"

    assert dict(CLAUDE_SETTINGS.env) == {"CLAUDE_CODE_ENABLE_TELEMETRY": "1"}


def test_env_is_copied_on_construction():
    source = {"A": "1"}
    settings = ClaudeSettings(env=source)
    source["B"] = "2"

    assert dict(settings.env) == {"A": "1"}
    assert settings.as_dict()["env"] == {"A": "1"}


def test_default_env_is_read_only():
    with pytest.raises(TypeError):
        ClaudeSettings().env["X"] = "1"
