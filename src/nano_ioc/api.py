import logging
from typing import Optional

from .container import ApplicationContext
from .scanner import TypeLoader


def init(root_namespace: str, *, loader: Optional[TypeLoader] = None, logger: Optional[logging.Logger] = None) -> ApplicationContext:
    """Create an :class:`ApplicationContext` for *root_namespace* and scan it.

    Equivalent to ``ApplicationContext(root_namespace, ...).init()``.
    """
    return ApplicationContext(root_namespace, loader=loader, logger=logger).init()
