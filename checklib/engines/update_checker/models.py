"""Data models for the update checker engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from checklib.engines.reference_extractor.models import Reference

OutcomeStatus = Literal["current", "outdated", "lookup_failed"]


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of checking one reference against its provider's registry."""

    reference: Reference
    status: OutcomeStatus
    latest_version: str | None = None  # set only when status == "outdated"
    error: str | None = None  # diagnostic only, never shown as a distinct status
