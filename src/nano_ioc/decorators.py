# nano_ioc/decorators.py
from __future__ import annotations

from typing import Any, Tuple, TypeVar

from .constants import MARKERS_ATTR

T = TypeVar("T")


def markers_of(obj: Any) -> Tuple["Marker", ...]:
    """Markers attached directly to *obj* (a class or a marker); inherited ones are ignored."""
    if isinstance(obj, type):
        return tuple(vars(obj).get(MARKERS_ATTR, ()))
    return tuple(getattr(obj, MARKERS_ATTR, ()))


def _attach(target, marker: "Marker") -> None:
    current = markers_of(target)
    if marker not in current:
        setattr(target, MARKERS_ATTR, current + (marker,))


class Marker:
    """Declarative metadata used to tell the scanner what is a component.

    Applying a marker to a class tags the class; applying it to another
    marker tags that marker, which is how specializations such as
    :data:`service` are declared::

        audited = component(Marker("audited"))

        @audited
        class AuditLog: ...
    """

    __slots__ = ("name", MARKERS_ATTR)

    def __init__(self, name: str):
        self.name = name
        setattr(self, MARKERS_ATTR, ())

    def __call__(self, target: T) -> T:
        if not isinstance(target, (type, Marker)):
            raise TypeError(f"@{self.name} can only be applied to a class or a Marker, got {target!r}")
        _attach(target, self)
        return target

    def __repr__(self) -> str:
        return f"Marker({self.name!r})"


component = Marker("component")

# Specializations carry the base marker, so they are recognised one level deep.
service = component(Marker("service"))
repository = component(Marker("repository"))
controller = component(Marker("controller"))
configuration = component(Marker("configuration"))


__all__ = [
    "Marker", "markers_of",
    "component", "service", "repository", "controller", "configuration",
]
