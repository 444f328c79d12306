"""
Email Notifier
"""

from .base_notifier import BaseNotifier


class EmailNotifier(BaseNotifier):
    """Send notifications to an email recipient"""

    def __init__(self, recipient: str, sink=None, renderer=None):
        """
        Initialize Email notifier

        Args:
            recipient: Email address of the recipient
            sink: Optional OutputSink (default: console)
            renderer: Optional TemplateRenderer
        """
        super().__init__(recipient, sink=sink, renderer=renderer)

    @property
    def recipient(self) -> str:
        return self.destination

    @property
    def channel(self) -> str:
        return "email"

    @property
    def channel_name(self) -> str:
        """Return channel name for the output line"""
        return "email"
