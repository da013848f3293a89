"""cssforge: CSS selector builder and small object helpers.

Logging is silent until the host opts in with ``configure_from_settings()``
or ``setup_logging()``.
"""

from cssforge.config.logging import configure_from_settings, setup_logging
from cssforge.selector.facade import css_selector_builder
from cssforge.serialization import from_json, to_json
from cssforge.shapes import Rectangle

__all__ = [
    "Rectangle",
    "configure_from_settings",
    "css_selector_builder",
    "from_json",
    "setup_logging",
    "to_json",
]
