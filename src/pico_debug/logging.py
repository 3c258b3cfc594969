"""Logging utilities for pico-debug's own diagnostics.

These are ordinary ``logging`` loggers under the ``pico_debug`` namespace,
separate from the namespace loggers the library hands out.  What they
report:

- ``pico_debug.registry``: every installed specification, with its
  generation and include/exclude counts (DEBUG).
- ``pico_debug.config``: ``DEBUG_*`` values rejected in favor of a default
  (WARNING).
- ``pico_debug.bootstrap``: plugin entry points that failed to import
  (WARNING) and plugin formatters that were registered (DEBUG).

``get_logger()`` returns a logger under that namespace.
``configure_logging()`` sets the level and handler for all of them.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
"""str: Default log format used by ``configure_logging``."""


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the pico_debug namespace.

    Args:
        name: Logger name. If not prefixed with 'pico_debug', it will be added.

    Returns:
        A configured Logger instance.
    """
    if not name.startswith("pico_debug"):
        name = f"pico_debug.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO, handler: Optional[logging.Handler] = None) -> None:
    """Route pico-debug's own diagnostics to a handler.

    Pass ``level=logging.DEBUG`` to see each specification change as it is
    installed.

    Args:
        level: Logging level (default: INFO)
        handler: Custom handler. If None, uses StreamHandler to stderr.
    """
    root_logger = logging.getLogger("pico_debug")
    root_logger.setLevel(level)

    if not root_logger.handlers:
        if handler is None:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(handler)
