"""User-facing notifications.

Resolution components decide *what* to tell the user and *when*; how the
message is displayed belongs to the host (an editor, a CLI, a test). Each
component receives a NotificationSink and hands it Notification objects
instead of printing or raising.

Example:
    >>> from repo_permalink.notifications import CollectingNotificationSink, Notification, Severity
    >>> sink = CollectingNotificationSink()
    >>> sink.notify(Notification(Severity.WARNING, "Multiple remotes available"))
    >>> sink.warnings
    ['Multiple remotes available']
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)


class Severity(str, Enum):
    """Severity of a user-facing notification."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    """A single diagnostic message for the user.

    Attributes:
        severity: Error or warning
        message: Human-readable text
    """

    severity: Severity
    message: str


class NotificationSink(Protocol):
    """Receives notifications emitted during resolution."""

    def notify(self, notification: Notification) -> None: ...


class LogNotificationSink:
    """Sink that forwards notifications to structlog.

    Used when the host supplies no sink of its own.
    """

    def notify(self, notification: Notification) -> None:
        if notification.severity is Severity.ERROR:
            log.error("notification", message=notification.message)
        else:
            log.warning("notification", message=notification.message)


@dataclass
class CollectingNotificationSink:
    """Sink that keeps every notification in memory, in emission order.

    Attributes:
        notifications: All notifications received so far
    """

    notifications: list[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def errors(self) -> list[str]:
        """Messages of error notifications."""
        return [n.message for n in self.notifications if n.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[str]:
        """Messages of warning notifications."""
        return [n.message for n in self.notifications if n.severity is Severity.WARNING]
