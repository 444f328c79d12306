"""
SMS Notifier
"""

from .base_notifier import BaseNotifier


class SMSNotifier(BaseNotifier):
    """Send notifications to a phone number via SMS"""

    def __init__(self, phone_number: str, sink=None, renderer=None):
        super().__init__(phone_number, sink=sink, renderer=renderer)

    @property
    def phone_number(self) -> str:
        return self.destination

    @property
    def channel(self) -> str:
        return "sms"

    @property
    def channel_name(self) -> str:
        return "SMS"
