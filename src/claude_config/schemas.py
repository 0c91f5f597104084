from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Permissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    allow: tuple[str, ...] = ()
    deny: tuple[str, ...] = ()


class ClaudeSettings(BaseModel):
    """Claude CLI settings that are layered on top of the MCP server config."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    permissions: Permissions = Field(default_factory=Permissions)
    env: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    cleanup_period_days: int = Field(30, alias="cleanupPeriodDays", ge=1)
    include_co_authored_by: bool = Field(True, alias="includeCoAuthoredBy")

    @field_validator("env", mode="after")
    @classmethod
    def _freeze_env(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("env")
    def _dump_env(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def as_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible dict keyed the way the Claude CLI expects."""
        return self.model_dump(mode="json", by_alias=True)


# Claude-specific settings (non-MCP)
CLAUDE_SETTINGS = ClaudeSettings(
    permissions=Permissions(allow=("*",), deny=()),
    env={"CLAUDE_CODE_ENABLE_TELEMETRY": "1"},
    cleanup_period_days=30,
    include_co_authored_by=True,
)
