"""
Pytest configuration for notification pattern tests.

- Ensures that the project root is added to sys.path so that
  `import notification_patterns` and `import main` work without installing.
- Provides a recording output sink and counting test doubles.
"""

import sys
from pathlib import Path
from typing import List


def _ensure_project_root_in_sys_path() -> None:
    # parents[1] -> project root
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


_ensure_project_root_in_sys_path()

# pylint: disable=wrong-import-position
import pytest  # noqa: E402
from prometheus_client import CollectorRegistry  # noqa: E402

from notification_patterns.config_manager import ConfigManager  # noqa: E402
from notification_patterns.prometheus_metrics import PrometheusMetrics  # noqa: E402
from notification_patterns.sinks import OutputSink  # noqa: E402


class RecordingSink(OutputSink):
    def __init__(self) -> None:
        self.lines: List[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


class CountingNotifier:
    """Notifier double recording every message it is asked to send"""

    def __init__(self, destination: str = "test-destination", result: bool = True) -> None:
        self.destination = destination
        self.result = result
        self.messages: List[str] = []

    def send(self, message: str) -> bool:
        self.messages.append(message)
        return self.result


class CountingFactory:
    """Factory double counting create_notifier() calls"""

    def __init__(self, destination: str = "test-destination") -> None:
        self.destination = destination
        self.create_calls = 0
        self.produced: List[CountingNotifier] = []

    def create_notifier(self) -> CountingNotifier:
        self.create_calls += 1
        notifier = CountingNotifier(self.destination)
        self.produced.append(notifier)
        return notifier


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def counting_notifier() -> CountingNotifier:
    return CountingNotifier()


@pytest.fixture
def counting_factory() -> CountingFactory:
    return CountingFactory()


@pytest.fixture
def metrics() -> PrometheusMetrics:
    return PrometheusMetrics(port=0, registry=CollectorRegistry())


@pytest.fixture
def default_config() -> ConfigManager:
    return ConfigManager(None)
