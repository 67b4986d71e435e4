from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or int(value) < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer")
    return int(value)


def require_clock_order(event) -> None:
    """Reject clock events whose timestamps cannot describe a real shift."""
    if event.clock_in_at is None:
        if event.clock_out_at is not None:
            raise ValidationError(f"Clock-out without clock-in for user {event.user_id} on {event.local_date}")
        return
    if event.clock_out_at is not None and event.clock_out_at <= event.clock_in_at:
        raise ValidationError(f"Clock-out precedes clock-in for user {event.user_id} on {event.local_date}")
