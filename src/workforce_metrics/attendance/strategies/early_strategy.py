from __future__ import annotations

from ...core.enums import ArrivalStatus
from .base import ArrivalDecision, ArrivalStrategy, whole_minutes


class EarlyArrivalStrategy(ArrivalStrategy):
    """Clock-in at or before the early threshold."""

    def decide(self, *, minutes_from_start: float) -> ArrivalDecision:
        return ArrivalDecision(
            status=ArrivalStatus.EARLY,
            minutes_from_start=minutes_from_start,
            note=f"Early by {whole_minutes(minutes_from_start)} min",
        )
