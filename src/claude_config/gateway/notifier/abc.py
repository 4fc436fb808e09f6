"""Desktop notification gateway ABC."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A desktop notification ready to display."""

    title: str
    subtitle: str
    message: str


class Notifier(ABC):
    """Abstract gateway for showing desktop notifications."""

    @abstractmethod
    def send(self, notification: Notification) -> None:
        """Show a notification.

        Raises:
            OSError: If the notifier program cannot be started
            subprocess.CalledProcessError: If the notifier program fails
        """
        ...
