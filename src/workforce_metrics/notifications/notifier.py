from __future__ import annotations

import logging
from typing import Protocol

from flask import flash, has_request_context

from ..core.enums import Severity
from .model import Notification

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None:
        raise NotImplementedError


class LoggingNotifier:
    """Used outside a request context (scripts, background jobs)."""

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.severity in (Severity.WARNING, Severity.DANGER) else logging.INFO
        logger.log(level, "%s: %s", notification.title, notification.description)


class FlashNotifier(LoggingNotifier):
    """Queue notifications as Flask flash messages (category = severity).

    Outside a request there is no session to flash into; the message is only logged.
    """

    def notify(self, notification: Notification) -> None:
        super().notify(notification)
        if has_request_context():
            flash(f"{notification.title}: {notification.description}", notification.severity.value)
