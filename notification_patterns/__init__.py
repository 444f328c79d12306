"""
Notification Patterns Package
Dependency Injection and Factory Method examples built around a toy notifier
"""

__version__ = "1.0.0"
__author__ = "Notification Patterns"

# pylint: disable=wrong-import-position
from .exceptions import NotificationError, UnknownNotificationType
from .config_manager import ConfigManager
from .notification_service import FactoryNotificationService, NotificationService
from .notifiers import get_notification_factory

__all__ = [
    'NotificationError',
    'UnknownNotificationType',
    'ConfigManager',
    'NotificationService',
    'FactoryNotificationService',
    'get_notification_factory',
]
