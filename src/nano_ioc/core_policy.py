# nano_ioc/core_policy.py
from __future__ import annotations

from .analysis import TypeDescriptor
from .decorators import Marker, component, markers_of


def carries_base_marker(marker: Marker, base: Marker = component) -> bool:
    """True if *marker* is *base* or is itself marked with *base*.

    Only one level of marker-on-marker indirection is followed.
    """
    return marker is base or base in markers_of(marker)


def is_eligible(descriptor: TypeDescriptor, base: Marker = component) -> bool:
    """Decide whether a scanned class should be registered as a bean.

    Protocols and abstract classes are never eligible. Anything else is
    eligible when it carries *base* directly, or carries a marker that
    carries *base* (e.g. ``@service``).
    """
    if not descriptor.is_concrete:
        return False
    return any(carries_base_marker(m, base) for m in descriptor.markers)
