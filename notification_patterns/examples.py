"""
Example programs

run_dependency_injection_example: an EmailNotifier injected into a
NotificationService.

run_factory_method_example: services built from concrete factories, then
services built from factories chosen by notification type. An unknown type
is logged and the run continues with the next entry.
"""

import logging
from typing import Any, Dict, Optional

from .exceptions import UnknownNotificationType
from .notification_service import FactoryNotificationService, NotificationService
from .notifiers import FACTORY_MAP, EmailNotifier, get_notification_factory, resolve_notification_type
from .sinks import OutputSink

logger = logging.getLogger(__name__)


def run_dependency_injection_example(config, sink: Optional[OutputSink] = None,
                                     renderer=None, metrics=None) -> bool:
    """
    Send one email through a service with an injected notifier

    Args:
        config: ConfigManager instance
        sink: Optional OutputSink for the notifier
        renderer: Optional TemplateRenderer for the notifier
        metrics: Optional PrometheusMetrics instance

    Returns:
        Result of NotificationService.notify()
    """
    settings = config.get("examples", "dependency_injection") or {}
    recipient = settings["recipient"]
    message = settings["message"]

    logger.info("Running dependency injection example...")
    email = EmailNotifier(recipient, sink=sink, renderer=renderer)
    service = NotificationService(email)

    sent = service.notify(message)
    if sent and metrics:
        metrics.record_sent(email.channel)
    return sent


def _notify(service: FactoryNotificationService, entry: Dict[str, Any], metrics) -> bool:
    sent = service.notify(entry["message"])
    if not sent:
        logger.warning(f"⚠ {entry['type']} notification to {entry['destination']} was not sent")
    elif metrics:
        metrics.record_sent(resolve_notification_type(entry["type"]).value)
    return sent


def _report_unknown_type(error: UnknownNotificationType, metrics) -> None:
    logger.error(f"Error: {error}")
    if metrics:
        metrics.record_unknown_type(error.notification_type)


def run_factory_method_example(config, sink: Optional[OutputSink] = None,
                               renderer=None, metrics=None) -> int:
    """
    Send notifications through factory-backed services

    Args:
        config: ConfigManager instance
        sink: Optional OutputSink for produced notifiers
        renderer: Optional TemplateRenderer for produced notifiers
        metrics: Optional PrometheusMetrics instance

    Returns:
        Number of notifications sent
    """
    settings = config.get("examples", "factory_method") or {}
    sent_count = 0

    logger.info("Running factory method example with concrete factories...")
    for entry in settings.get("direct") or []:
        try:
            factory_class = FACTORY_MAP[resolve_notification_type(entry["type"])]
        except UnknownNotificationType as e:
            _report_unknown_type(e, metrics)
            continue

        factory = factory_class(entry["destination"], sink=sink, renderer=renderer)
        if _notify(FactoryNotificationService(factory), entry, metrics):
            sent_count += 1

    logger.info("Running factory method example with notification preferences...")
    for entry in settings.get("preferences") or []:
        try:
            factory = get_notification_factory(entry["type"], entry["destination"],
                                               sink=sink, renderer=renderer)
        except UnknownNotificationType as e:
            _report_unknown_type(e, metrics)
            continue

        if _notify(FactoryNotificationService(factory), entry, metrics):
            sent_count += 1

    logger.info(f"Factory method example sent {sent_count} notification(s)")
    return sent_count
