"""Table of contents entry models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TocEntry(BaseModel):
    """A serializable table of contents entry."""

    title: str
    anchor: str
    level: int | None = Field(default=None, ge=1, le=6)
    children: list["TocEntry"] = Field(default_factory=list)
