"""
Output sinks for notifier lines

Notifiers do not print directly. Each formatted line goes to an OutputSink,
which defaults to the console and can be swapped for a logger or a test double.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class OutputSink(ABC):
    """Destination for the lines produced by notifiers"""

    @abstractmethod
    def write(self, line: str) -> None:
        """
        Emit one formatted notification line

        Args:
            line: Line without trailing newline
        """
        pass


class ConsoleSink(OutputSink):
    """Write lines to a text stream (stdout unless another stream is given)"""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str) -> None:
        # Resolve stdout lazily so redirected/captured stdout is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()


class LoggingSink(OutputSink):
    """Write lines to a logger at INFO level"""

    def __init__(self, sink_logger: Optional[logging.Logger] = None):
        self._logger = sink_logger or logger

    def write(self, line: str) -> None:
        self._logger.info(line)


SINK_MAP = {
    "console": ConsoleSink,
    "log": LoggingSink,
}


def create_sink(kind: str) -> OutputSink:
    """
    Build an output sink by name

    Args:
        kind: "console" or "log"

    Returns:
        New OutputSink instance

    Raises:
        ValueError: If the sink name is not recognized
    """
    sink_class = SINK_MAP.get(kind)
    if sink_class is None:
        raise ValueError(f"Unknown output sink: '{kind}'. Valid sinks: {', '.join(SINK_MAP)}")
    return sink_class()
