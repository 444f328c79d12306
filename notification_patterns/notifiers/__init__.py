"""
Notifiers and notifier factories

This package provides the Notifier capability with three variants:
- Email (recipient address)
- SMS (phone number)
- Push (device id)

and the matching NotificationFactory variants with a type-keyed selector.

Usage:
    from notification_patterns.notifiers import get_notification_factory

    factory = get_notification_factory("sms", "+1234567890")
    factory.create_notifier().send("Hello")
"""

from .base_notifier import BaseNotifier
from .email_notifier import EmailNotifier
from .sms_notifier import SMSNotifier
from .push_notifier import PushNotifier
from .notification_factory import (
    FACTORY_MAP,
    EmailFactory,
    NotificationFactory,
    NotificationType,
    PushFactory,
    SMSFactory,
    get_notification_factory,
    resolve_notification_type,
)

__all__ = [
    "BaseNotifier",
    "EmailNotifier",
    "SMSNotifier",
    "PushNotifier",
    "NotificationFactory",
    "EmailFactory",
    "SMSFactory",
    "PushFactory",
    "NotificationType",
    "FACTORY_MAP",
    "get_notification_factory",
    "resolve_notification_type",
]
