"""Data models for branch parsing and config reconciliation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VersionTag(BaseModel):
    """An update level, rendered as ``up<major>.<minor>``."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(default=0, ge=0)


class ParsedBranch(BaseModel):
    """Year and update carried by a branch name.

    ``year`` is None when the ref did not match the branch grammar or failed
    validation. ``update`` is None for year-only branches.
    """

    model_config = ConfigDict(frozen=True)

    year: int | None = None
    update: VersionTag | None = None

    @classmethod
    def unknown(cls) -> "ParsedBranch":
        return cls()


class SyncResult(BaseModel):
    """Outcome of a single sync run."""

    updated: bool = False
    changed: bool = False
    config: dict[str, Any] | None = None
    branch: ParsedBranch | None = None
