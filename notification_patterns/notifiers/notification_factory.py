"""
Notification factories
One factory per notifier variant, plus a selector that maps a notification
type token to the matching factory
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Type

from ..exceptions import UnknownNotificationType
from ..sinks import OutputSink
from .base_notifier import BaseNotifier
from .email_notifier import EmailNotifier
from .push_notifier import PushNotifier
from .sms_notifier import SMSNotifier

logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    """Recognized notification type tokens"""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class NotificationFactory(ABC):
    """
    Abstract base class for notifier factories

    A factory holds exactly the destination its notifier needs and builds a
    fresh notifier on every create_notifier() call. The optional sink and
    renderer are handed to each notifier it builds.
    """

    def __init__(self, destination: str, sink: Optional[OutputSink] = None, renderer=None):
        self._destination = destination
        self._sink = sink
        self._renderer = renderer

    @property
    def destination(self) -> str:
        return self._destination

    @abstractmethod
    def create_notifier(self) -> BaseNotifier:
        """
        Build a new notifier for this factory's destination

        Returns:
            Freshly constructed notifier
        """
        pass

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._destination == other._destination

    def __hash__(self):
        return hash((type(self), self._destination))

    def __repr__(self):
        return f"{type(self).__name__}({self._destination!r})"


class EmailFactory(NotificationFactory):
    """Builds EmailNotifier instances"""

    def __init__(self, recipient: str, sink: Optional[OutputSink] = None, renderer=None):
        super().__init__(recipient, sink=sink, renderer=renderer)

    @property
    def recipient(self) -> str:
        return self.destination

    def create_notifier(self) -> EmailNotifier:
        return EmailNotifier(self._destination, sink=self._sink, renderer=self._renderer)


class SMSFactory(NotificationFactory):
    """Builds SMSNotifier instances"""

    def __init__(self, phone_number: str, sink: Optional[OutputSink] = None, renderer=None):
        super().__init__(phone_number, sink=sink, renderer=renderer)

    @property
    def phone_number(self) -> str:
        return self.destination

    def create_notifier(self) -> SMSNotifier:
        return SMSNotifier(self._destination, sink=self._sink, renderer=self._renderer)


class PushFactory(NotificationFactory):
    """Builds PushNotifier instances"""

    def __init__(self, device_id: str, sink: Optional[OutputSink] = None, renderer=None):
        super().__init__(device_id, sink=sink, renderer=renderer)

    @property
    def device_id(self) -> str:
        return self.destination

    def create_notifier(self) -> PushNotifier:
        return PushNotifier(self._destination, sink=self._sink, renderer=self._renderer)


# Map notification types to factory classes
FACTORY_MAP: Dict[NotificationType, Type[NotificationFactory]] = {
    NotificationType.EMAIL: EmailFactory,
    NotificationType.SMS: SMSFactory,
    NotificationType.PUSH: PushFactory,
}


def resolve_notification_type(notification_type) -> NotificationType:
    """
    Map a type token to its NotificationType (exact, case-sensitive)

    Raises:
        UnknownNotificationType: If the token is not recognized
    """
    try:
        return NotificationType(notification_type)
    except ValueError:
        raise UnknownNotificationType(notification_type) from None


def get_notification_factory(notification_type, destination: str,
                             sink: Optional[OutputSink] = None, renderer=None) -> NotificationFactory:
    """
    Select the factory for a notification type

    Args:
        notification_type: "email", "sms" or "push" (exact, case-sensitive),
            or a NotificationType member
        destination: Destination handed to the factory
        sink: Optional OutputSink for the notifiers the factory builds
        renderer: Optional TemplateRenderer for the notifiers the factory builds

    Returns:
        Factory for the requested type

    Raises:
        UnknownNotificationType: If the type is not recognized
    """
    factory_class = FACTORY_MAP[resolve_notification_type(notification_type)]
    logger.debug(f"Selected {factory_class.__name__} for '{notification_type}'")
    return factory_class(destination, sink=sink, renderer=renderer)
