from typing import List, Optional, Protocol

from pydantic import BaseModel

from app.platform.logger import get_logger

logger = get_logger("accessibility_notifier")


class Notification(BaseModel):
    title: str
    description: str
    is_error: bool = False


class Notifier(Protocol):
    """Sink for user-visible notifications (toasts in the web UI)"""

    def notify(self, title: str, description: str, is_error: bool) -> None:
        ...


class LoggingNotifier:
    """Writes notifications to the application log"""

    def notify(self, title: str, description: str, is_error: bool) -> None:
        if is_error:
            logger.warning(f"{title}: {description}")
        else:
            logger.info(f"{title}: {description}")


class CollectingNotifier:
    """Keeps notifications in memory, in the order they were emitted"""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, title: str, description: str, is_error: bool) -> None:
        self.notifications.append(
            Notification(title=title, description=description, is_error=is_error)
        )

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None
