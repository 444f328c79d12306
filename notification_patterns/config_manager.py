"""
Configuration Manager for the notification examples
Loads optional JSON configuration over built-in defaults and validates it
"""

import copy
import json
import sys
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .notifiers import NotificationType
from .sinks import SINK_MAP

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "timezone": "Europe/Warsaw",
    },
    "output": {
        "sink": "console",
        "templates_dir": None,
    },
    "prometheus": {
        "enabled": False,
        "port": 8000,
    },
    "examples": {
        "dependency_injection": {
            "recipient": "acetina@example.com",
            "message": "Hello!",
        },
        "factory_method": {
            "direct": [
                {"type": "email", "destination": "usuario@example.com", "message": "Hello via Email!"},
                {"type": "sms", "destination": "+1234567890", "message": "Hello via SMS!"},
                {"type": "push", "destination": "device123", "message": "Hello via Push Notification!"},
            ],
            "preferences": [
                {"type": "email", "destination": "admin@example.com", "message": "System Alert via Email!"},
                {"type": "sms", "destination": "+1987654321", "message": "System Alert via SMS!"},
                {"type": "push", "destination": "device456", "message": "System Alert via Push Notification!"},
            ],
        },
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base; nested dicts merge, everything else replaces"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Manages example configuration from an optional JSON file"""

    def __init__(self, config_path: Optional[str] = "config.json"):
        """
        Initialize configuration manager

        Args:
            config_path: Path to configuration JSON file. Built-in defaults
                are used when the path is None or the file does not exist.
        """
        self.config_path = Path(config_path) if config_path else None
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from JSON file merged over defaults

        Returns:
            Configuration dictionary

        Raises:
            SystemExit: If configuration file is invalid
        """
        if self.config_path is None or not self.config_path.exists():
            logger.info(f"No configuration file found ({self.config_path}) - using built-in defaults")
            return copy.deepcopy(DEFAULT_CONFIG)

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)

            if not isinstance(file_config, dict):
                raise ValueError("Configuration root must be a JSON object")

            config = _deep_merge(DEFAULT_CONFIG, file_config)
            self._validate_config(config)

            logger.info(f"Configuration loaded from {self.config_path}")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            sys.exit(1)

    def _validate_config(self, config: Dict[str, Any]):
        """
        Validate configuration values

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValueError: If a value is invalid
        """
        sink = config["output"].get("sink")
        if sink not in SINK_MAP:
            raise ValueError(f"Invalid output sink: '{sink}'. Valid sinks: {', '.join(SINK_MAP)}")

        port = config["prometheus"].get("port")
        if not isinstance(port, int) or isinstance(port, bool) or port <= 0:
            raise ValueError("Field 'prometheus.port' must be a positive integer")

        self._validate_examples(config["examples"])

    def _validate_examples(self, examples: Dict[str, Any]):
        """
        Validate example sections

        Unknown types are allowed in factory_method.preferences since those go
        through the factory selector, which reports them at run time.
        """
        di = examples.get("dependency_injection") or {}
        recipient = di.get("recipient")
        if not isinstance(recipient, str) or not recipient:
            raise ValueError("Field 'examples.dependency_injection.recipient' must be a non-empty string")
        if not isinstance(di.get("message"), str):
            raise ValueError("Field 'examples.dependency_injection.message' must be a string")

        factory_method = examples.get("factory_method") or {}
        known_types = [t.value for t in NotificationType]
        for section in ("direct", "preferences"):
            entries = factory_method.get(section)
            if not isinstance(entries, list):
                raise ValueError(f"Field 'examples.factory_method.{section}' must be a list")
            for index, entry in enumerate(entries):
                self._validate_entry(entry, f"examples.factory_method.{section}[{index}]")
                if section == "direct" and entry["type"] not in known_types:
                    raise ValueError(
                        f"Invalid type '{entry['type']}' in examples.factory_method.{section}[{index}]. "
                        f"Valid types: {', '.join(known_types)}"
                    )

    def _validate_entry(self, entry: Any, path: str):
        """Validate a single {type, destination, message} entry"""
        if not isinstance(entry, dict):
            raise ValueError(f"Field '{path}' must be an object")
        for field in ("type", "destination"):
            if not isinstance(entry.get(field), str) or not entry[field]:
                raise ValueError(f"Field '{path}.{field}' must be a non-empty string")
        if not isinstance(entry.get("message"), str):
            raise ValueError(f"Field '{path}.message' must be a string")

    def get(self, *keys: str, default: Any = None) -> Optional[Any]:
        """
        Get configuration value by nested keys

        Args:
            *keys: Keys to traverse in configuration dictionary
            default: Value to return if key is not found (default: None)

        Returns:
            Configuration value, or default if not found

        Example:
            config.get("output", "sink")  # Returns "console"
            config.get("prometheus", "enabled", default=False)
        """
        value = self.config
        for key in keys:
            if not isinstance(value, dict):
                return default
            value = value.get(key)
            if value is None:
                return default
        return value

    def reload(self):
        """Reload configuration from file"""
        self.config = self.load_config()
        logger.info("Configuration reloaded")
