"""Data models for the reference extractor engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Provider = Literal["unpkg", "cdnjs", "jsdelivr"]
AssetType = Literal["script", "link"]


@dataclass(frozen=True)
class Reference:
    """One CDN-hosted asset declared in the document.

    This is a pure value object — compared by value, never mutated.
    """

    name: str
    declared_version: str  # opaque, compared by exact string equality only
    provider: Provider
    asset_type: AssetType
    url: str = field(default="", compare=False)


@dataclass(frozen=True)
class SkippedUrl:
    """A CDN URL that matched a known host but not its path grammar."""

    url: str
    reason: str
    asset_type: AssetType


@dataclass
class ExtractionResult:
    """Result of scanning one document snapshot."""

    references: list[Reference] = field(default_factory=list)
    skipped: list[SkippedUrl] = field(default_factory=list)
    script_tags: int = 0
    link_tags: int = 0
