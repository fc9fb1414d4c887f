"""User-facing notifications emitted by the form (rendering is up to the UI)."""

from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel

from utils.logging_config import setup_logging

logger = setup_logging(name=__name__)


class NotificationVariant(str, Enum):
    """Notification style."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """A toast-like message for the user."""

    title: str
    description: str = ""
    variant: NotificationVariant = NotificationVariant.DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == NotificationVariant.DESTRUCTIVE


NotificationSink = Callable[[Notification], None]


class NotificationLog:
    """Default sink: keeps notifications in order and logs them."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)
        log = logger.warning if notification.is_error else logger.info
        log(f"Notification: {notification.title} - {notification.description}")

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None
