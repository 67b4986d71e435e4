from __future__ import annotations

from ...core.enums import ArrivalStatus
from .base import ArrivalDecision, ArrivalStrategy, whole_minutes


class LateArrivalStrategy(ArrivalStrategy):
    """Clock-in past the late threshold."""

    def decide(self, *, minutes_from_start: float) -> ArrivalDecision:
        return ArrivalDecision(
            status=ArrivalStatus.LATE,
            minutes_from_start=minutes_from_start,
            note=f"Late by {whole_minutes(minutes_from_start)} min",
        )
