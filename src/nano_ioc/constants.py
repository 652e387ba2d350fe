"""Constants used throughout the nano-ioc container.

This module defines the attribute name stamped onto marked classes and
markers, the framework logger, and the scanning delimiters.
"""

import logging

LOGGER_NAME: str = "nano_ioc"
"""Default logger name for the nano-ioc container."""

LOGGER: logging.Logger = logging.getLogger(LOGGER_NAME)
"""Pre-configured logger instance for nano-ioc internal diagnostics."""

MARKERS_ATTR: str = "_nano_markers"
"""Attribute name storing the tuple of markers attached directly to a class or marker."""

NESTED_DELIMITERS: tuple[str, ...] = (".", "<")
"""Characters in a ``__qualname__`` that identify nested or function-local classes."""
