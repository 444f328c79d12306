"""
Notification services

Thin wrappers exposing notify(). NotificationService receives its notifier
through the constructor (dependency injection); FactoryNotificationService
holds a factory and asks it for a new notifier on every call (factory method).
Neither adds behavior of its own: results and errors pass through unchanged.
"""

import logging

from .notifiers import BaseNotifier, NotificationFactory

logger = logging.getLogger(__name__)


class NotificationService:
    """Delegates notifications to an injected notifier"""

    def __init__(self, notifier: BaseNotifier):
        """
        Initialize service

        Args:
            notifier: Notifier every notify() call is delegated to
        """
        self._notifier = notifier

    @property
    def notifier(self) -> BaseNotifier:
        return self._notifier

    def notify(self, message: str) -> bool:
        """
        Send message through the injected notifier

        Args:
            message: Message body

        Returns:
            Result of the notifier's send()
        """
        return self._notifier.send(message)


class FactoryNotificationService:
    """Delegates notifications to a notifier produced per call by a factory"""

    def __init__(self, factory: NotificationFactory):
        self._factory = factory

    @property
    def factory(self) -> NotificationFactory:
        return self._factory

    def notify(self, message: str) -> bool:
        """
        Create a notifier and send message through it

        The produced notifier is never cached; each call gets a new one.

        Args:
            message: Message body

        Returns:
            Result of the new notifier's send()
        """
        notifier = self._factory.create_notifier()
        logger.debug(f"{type(self._factory).__name__} produced {notifier!r}")
        return notifier.send(message)
