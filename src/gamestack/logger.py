"""Logging configuration for gamestack hosts.

Transitions are logged at DEBUG under the ``gamestack`` namespace, so a host
passes ``debug=True`` to watch the stack change.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)5s] %(name)s: %(message)s"


def configure_logging(debug: bool = False, level: Optional[str] = None) -> logging.Logger:
    if level is not None:
        numeric_level = getattr(logging, level.upper(), logging.INFO)
    else:
        numeric_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    root = logging.getLogger("gamestack")
    root.setLevel(numeric_level)
    return root
