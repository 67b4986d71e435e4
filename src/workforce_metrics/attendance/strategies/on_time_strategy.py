from __future__ import annotations

from ...core.enums import ArrivalStatus
from .base import ArrivalDecision, ArrivalStrategy


class OnTimeArrivalStrategy(ArrivalStrategy):
    """Clock-in inside the grace window around work start."""

    def decide(self, *, minutes_from_start: float) -> ArrivalDecision:
        return ArrivalDecision(status=ArrivalStatus.ON_TIME, minutes_from_start=minutes_from_start, note="On time")
