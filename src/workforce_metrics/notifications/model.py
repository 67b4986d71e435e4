from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Severity


@dataclass(frozen=True)
class Notification:
    """User-facing toast: fire-and-forget."""

    title: str
    description: str
    severity: Severity = Severity.INFO
