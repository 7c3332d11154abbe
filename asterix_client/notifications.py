"""User notifications (the toasts of a UI).

Pages report outcomes through a Notifier:

    def __call__(self, notification: Notification) -> None: ...

LogNotifier is the default and just writes to the log. A UI passes its own
implementation; tests pass one that records what it was given.
"""

from __future__ import annotations

import logging
from typing import Literal, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Level = Literal["success", "error"]


class Notification(BaseModel):
    level: Level
    message: str


class Notifier(Protocol):
    def __call__(self, notification: Notification) -> None: ...


class LogNotifier:
    """Writes notifications to the log. No UI required."""

    def __call__(self, notification: Notification) -> None:
        if notification.level == "error":
            logger.warning("notify: %s", notification.message)
        else:
            logger.info("notify: %s", notification.message)
