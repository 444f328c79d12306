"""
Push Notifier
Sends push notifications to a single device
"""

from .base_notifier import BaseNotifier


class PushNotifier(BaseNotifier):
    """Send push notifications to a device"""

    def __init__(self, device_id: str, sink=None, renderer=None):
        """
        Initialize Push notifier

        Args:
            device_id: Target device identifier
            sink: Optional OutputSink (default: console)
            renderer: Optional TemplateRenderer
        """
        super().__init__(device_id, sink=sink, renderer=renderer)

    @property
    def device_id(self) -> str:
        return self.destination

    @property
    def channel(self) -> str:
        return "push"

    @property
    def channel_name(self) -> str:
        return "push notification"
