#!/usr/bin/env python3
"""
Notification Patterns - Main Entry Point
Runs the dependency injection example and the factory method example
"""

import os
import sys
import logging

from notification_patterns import __version__
from notification_patterns.config_manager import ConfigManager
from notification_patterns.examples import run_dependency_injection_example, run_factory_method_example
from notification_patterns.logging_config import setup_logging, apply_config
from notification_patterns.prometheus_metrics import PrometheusMetrics
from notification_patterns.sinks import create_sink
from notification_patterns.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)


def find_config_path() -> str:
    """Return /data/config.json when mounted, otherwise config.json in the working directory"""
    return "/data/config.json" if os.path.exists("/data/config.json") else "config.json"


def main():
    """Main entry point"""
    setup_logging()

    logger.info("=" * 70)
    logger.info(f"Notification Patterns v{__version__}")
    logger.info("Examples: dependency injection, factory method")
    logger.info("=" * 70)

    try:
        logger.info("Loading configuration...")
        config = ConfigManager(find_config_path())
        apply_config(config)
        logger.info("✓ Configuration loaded")

        sink = create_sink(config.get("output", "sink", default="console"))
        renderer = TemplateRenderer(config.get("output", "templates_dir"))

        metrics = None
        if config.get("prometheus", "enabled", default=False):
            try:
                metrics = PrometheusMetrics(port=config.get("prometheus", "port", default=8000))
                metrics.start_server()
            except Exception as e:
                logger.warning(f"Failed to initialize Prometheus metrics: {e}")
                logger.info("Continuing without Prometheus monitoring")
        else:
            logger.info("Prometheus metrics disabled in configuration")

        run_dependency_injection_example(config, sink=sink, renderer=renderer, metrics=metrics)
        logger.info("✓ Dependency injection example completed")

        run_factory_method_example(config, sink=sink, renderer=renderer, metrics=metrics)
        logger.info("✓ Factory method example completed")

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
