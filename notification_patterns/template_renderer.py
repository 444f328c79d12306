"""
Template Renderer for notification lines

Each notifier emits one line built from a per-channel Jinja2 template
(templates/<channel>.txt.j2). A custom directory from config
(output.templates_dir) is searched first, so a single channel can be
overridden while the others keep the built-in line.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, Template, TemplateError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def _build_search_paths(custom_templates_dir: Optional[str]) -> List[str]:
    """Custom directory (when it exists) ahead of the built-in one"""
    if not custom_templates_dir:
        return [str(DEFAULT_TEMPLATES_DIR)]

    custom_path = Path(custom_templates_dir)
    if not custom_path.is_dir():
        logger.warning(f"Custom templates directory not found: {custom_path}, using defaults only")
        return [str(DEFAULT_TEMPLATES_DIR)]

    logger.info(f"Custom templates directory: {custom_path}")
    return [str(custom_path), str(DEFAULT_TEMPLATES_DIR)]


class TemplateRenderer:
    """Renders notifier lines; failures are logged and reported as None"""

    TEMPLATE_MAP = {
        "email": "email.txt.j2",
        "sms": "sms.txt.j2",
        "push": "push.txt.j2",
    }

    def __init__(self, custom_templates_dir: Optional[str] = None):
        self.search_paths = _build_search_paths(custom_templates_dir)
        self.env = Environment(loader=FileSystemLoader(self.search_paths))

    def _load(self, channel: str) -> Optional[Template]:
        template_name = self.TEMPLATE_MAP.get(channel)
        if template_name is None:
            logger.error(f"No template mapping for channel: {channel}")
            return None
        try:
            return self.env.get_template(template_name)
        except TemplateError as e:
            logger.error(f"Cannot load template '{template_name}' for channel '{channel}': {e}")
            return None

    def render(self, channel: str, context: Dict[str, Any]) -> Optional[str]:
        """
        Render the line for a channel

        Args:
            channel: Channel key (email, sms, push)
            context: "destination" and "message"

        Returns:
            Rendered line, or None when the template is missing or broken
        """
        template = self._load(channel)
        if template is None:
            return None
        try:
            return template.render(**context)
        except TemplateError as e:
            logger.error(f"Template rendering error for channel '{channel}': {e}")
            return None

    def has_template(self, channel: str) -> bool:
        return self._load(channel) is not None
