"""Shared schemas for simpletoc."""

from simpletoc.schemas.toc import TocEntry

__all__ = ["TocEntry"]
