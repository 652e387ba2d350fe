"""Registry-key derivation from class names and constructor annotations."""

import types
from typing import Any, Optional, Union, get_args, get_origin


def derive_name(simple_name: str) -> str:
    """Lower-case the first character of *simple_name*, leaving the rest untouched.

    >>> derive_name("MyShopRepository")
    'myShopRepository'

    Raises:
        ValueError: If *simple_name* is empty; scanned classes always have a name.
    """
    if not simple_name:
        raise ValueError("Cannot derive a bean name from an empty type name")
    return simple_name[0].lower() + simple_name[1:]


def _unwrap_optional(ann: Any) -> Any:
    origin = get_origin(ann)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(ann) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return ann


def name_for(annotation: Any) -> Optional[str]:
    """Return the registry key a constructor parameter annotated with *annotation* resolves to.

    Classes use their ``__name__``; unresolved string forward references use
    their last dotted segment. Returns ``None`` for anything else.
    """
    ann = _unwrap_optional(annotation)
    if isinstance(ann, type):
        return derive_name(ann.__name__)
    if isinstance(ann, str):
        ref = ann.strip().strip("'\"").rsplit(".", 1)[-1]
        return derive_name(ref) if ref else None
    return None
