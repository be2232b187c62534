"""Transient, auto-dismissing notification channel"""

import itertools
import logging
import time
from typing import Callable, List, Optional

from creditsea_viewer.config import settings
from creditsea_viewer.domain.models import Notification, NotificationKind

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES = {
    NotificationKind.FETCH_FAILED: "Error fetching reports",
    NotificationKind.UPLOAD_FAILED: "Error uploading report",
    NotificationKind.UPLOAD_SUCCEEDED: "Report uploaded successfully",
}


class NotificationCenter:
    """
    Queue of ephemeral notifications.

    A notification stays pending until a page render consumes it, however
    long that takes. Its TTL starts at that render: the page receives the
    TTL and dismisses the toast itself, so each toast is shown exactly once.
    """

    def __init__(
        self,
        success_ttl: float | None = None,
        error_ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.success_ttl = success_ttl if success_ttl is not None else settings.success_notification_ttl_seconds
        self.error_ttl = error_ttl if error_ttl is not None else settings.error_notification_ttl_seconds
        self._clock = clock
        self._ids = itertools.count(1)
        self._pending: List[Notification] = []

    def notify(self, kind: NotificationKind, message: Optional[str] = None) -> Notification:
        """Raise a notification of the given kind"""
        notification = Notification(
            kind=kind,
            message=message or DEFAULT_MESSAGES[kind],
            raised_at=self._clock(),
            ttl_seconds=self.error_ttl if kind.is_error else self.success_ttl,
            id=next(self._ids),
        )
        self._pending.append(notification)

        log = logger.warning if kind.is_error else logger.info
        log("Notification raised", extra={"step": "notify", "kind": kind.value})
        return notification

    def pending(self) -> List[Notification]:
        """Notifications raised but not yet rendered, oldest first"""
        return list(self._pending)

    def consume(self) -> List[Notification]:
        """Hand pending notifications to a render, stamping when they were first shown"""
        notifications, self._pending = self._pending, []
        now = self._clock()
        for notification in notifications:
            notification.shown_at = now
            logger.debug(
                "Notification shown",
                extra={
                    "step": "notify_shown",
                    "kind": notification.kind.value,
                    "waited_ms": (now - notification.raised_at) * 1000,
                },
            )
        return notifications
