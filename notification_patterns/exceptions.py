"""
Exceptions raised by the notification examples
"""


class NotificationError(Exception):
    """Base class for notification errors"""


class UnknownNotificationType(NotificationError, ValueError):
    """Raised by the factory selector for an unrecognized notification type"""

    def __init__(self, notification_type):
        self.notification_type = notification_type
        super().__init__(f"unknown notification type: {notification_type}")
