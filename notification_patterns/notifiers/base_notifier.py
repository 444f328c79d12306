"""
Base Notifier Interface
All notification variants must implement this interface
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..sinks import ConsoleSink, OutputSink

logger = logging.getLogger(__name__)


class BaseNotifier(ABC):
    """
    Abstract base class for all notifiers

    A notifier delivers a message to a single fixed destination. Delivery here
    is one formatted line written to an output sink; there is no transport.
    Notifiers are immutable and compare equal by class and destination.
    """

    def __init__(self, destination: str, sink: Optional[OutputSink] = None, renderer=None):
        """
        Initialize notifier

        Args:
            destination: Recipient address, phone number or device id (not validated)
            sink: OutputSink receiving the formatted line (default: console)
            renderer: Optional TemplateRenderer used to format the line
        """
        self._destination = destination
        self._sink = sink if sink is not None else ConsoleSink()
        self._renderer = renderer

    @property
    def destination(self) -> str:
        """Destination this notifier sends to"""
        return self._destination

    @property
    @abstractmethod
    def channel(self) -> str:
        """
        Template key for this notifier

        Returns:
            Channel key (e.g., "email", "sms", "push")
        """
        pass

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """
        Return human-readable channel name used in the output line

        Returns:
            Channel name (e.g., "email", "SMS", "push notification")
        """
        pass

    def send(self, message: str) -> bool:
        """
        Send message to the destination

        Args:
            message: Message body

        Returns:
            True if the message was sent. Always True for console delivery;
            a real transport would return False on delivery failure.
        """
        line = self.format_line(message)
        self._sink.write(line)
        logger.debug(f"{self.channel_name} sent to {self._destination}")
        return True

    def format_line(self, message: str) -> str:
        """
        Build the output line for a message

        Uses the template renderer when one is configured and falls back to
        the built-in format if rendering fails.
        """
        if self._renderer is not None:
            rendered = self._renderer.render(
                self.channel,
                {"destination": self._destination, "message": message},
            )
            if rendered is not None:
                return rendered
            logger.warning(f"Template rendering failed for {self.channel}, using fallback")
        return self._build_fallback_line(message)

    def _build_fallback_line(self, message: str) -> str:
        return f"Sending {self.channel_name} with message: {self._destination}, {message}"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._destination == other._destination

    def __hash__(self):
        return hash((type(self), self._destination))

    def __repr__(self):
        return f"{type(self).__name__}({self._destination!r})"
