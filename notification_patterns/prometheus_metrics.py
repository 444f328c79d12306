"""
Prometheus Metrics for the notification examples
Exposes counters for sent notifications and rejected notification types
"""

import logging
from datetime import datetime
from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, start_http_server

logger = logging.getLogger(__name__)


class PrometheusMetrics:
    """
    Prometheus metrics manager

    Metrics exposed:
    - notifications_sent_total: Notifications sent, by channel
    - notification_unknown_type_total: Factory lookups rejected, by requested type
    - notification_last_sent_timestamp: Unix timestamp of the last sent notification
    """

    def __init__(self, port: int = 8000, registry: Optional[CollectorRegistry] = None):
        """
        Initialize Prometheus metrics

        Args:
            port: HTTP server port for /metrics endpoint (default: 8000)
            registry: Collector registry (default: global prometheus_client registry)
        """
        self.port = port
        self.registry = registry if registry is not None else REGISTRY
        self._server_started = False

        self.notifications_sent_total = Counter(
            'notifications_sent',
            'Total number of notifications sent',
            labelnames=['channel'],
            registry=self.registry
        )

        self.unknown_type_total = Counter(
            'notification_unknown_type',
            'Total number of factory lookups with an unknown notification type',
            labelnames=['notification_type'],
            registry=self.registry
        )

        self.last_sent_timestamp = Gauge(
            'notification_last_sent_timestamp',
            'Unix timestamp of the last sent notification',
            unit='seconds',
            registry=self.registry
        )

    def start_server(self):
        """
        Start Prometheus HTTP server in background thread

        Exposes /metrics endpoint on configured port
        """
        if self._server_started:
            logger.warning(f"Prometheus server already running on port {self.port}")
            return

        try:
            start_http_server(self.port, addr='127.0.0.1', registry=self.registry)
            self._server_started = True
            logger.info(f"✓ Prometheus metrics server started on port {self.port}")
            logger.info(f"  Metrics endpoint: http://localhost:{self.port}/metrics")
        except OSError as e:
            logger.error(f"Failed to start Prometheus server on port {self.port}: {e}")
            logger.warning("Continuing without Prometheus metrics")

    def record_sent(self, channel: str, timestamp: Optional[datetime] = None):
        """
        Record one sent notification

        Args:
            channel: Channel key (email, sms, push)
            timestamp: Time of sending (defaults to now)
        """
        if timestamp is None:
            timestamp = datetime.now()

        self.notifications_sent_total.labels(channel=channel).inc()
        self.last_sent_timestamp.set(timestamp.timestamp())
        logger.debug(f"Prometheus: Incremented notifications_sent_total[{channel}]")

    def record_unknown_type(self, notification_type):
        """
        Record a rejected notification type

        Args:
            notification_type: The unrecognized type token
        """
        self.unknown_type_total.labels(notification_type=str(notification_type)).inc()
        logger.debug(f"Prometheus: Incremented notification_unknown_type_total[{notification_type}]")
