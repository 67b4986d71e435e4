from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import ArrivalStatus


@dataclass(frozen=True)
class ArrivalDecision:
    status: ArrivalStatus
    minutes_from_start: float
    note: str


class ArrivalStrategy(ABC):
    """Strategy Pattern: encapsulate how an arrival bucket is reported."""

    @abstractmethod
    def decide(self, *, minutes_from_start: float) -> ArrivalDecision:
        raise NotImplementedError


def whole_minutes(minutes: float) -> int:
    return int(abs(minutes))
