import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from .decorators import Marker, markers_of


@dataclass(frozen=True)
class ConstructorParameter:
    name: str
    annotation: Any
    kind: Any
    has_default: bool = False
    default: Any = None

    @property
    def positional_only(self) -> bool:
        return self.kind is inspect.Parameter.POSITIONAL_ONLY

    @property
    def keyword_only(self) -> bool:
        return self.kind is inspect.Parameter.KEYWORD_ONLY


@dataclass(frozen=True)
class Constructor:
    """One way of building a class: an ordered list of parameters.

    Attributes:
        parameters: Constructor parameters in declaration order, ``self`` and
            variadic parameters excluded.
        source: The function the signature was read from.
    """
    parameters: Tuple[ConstructorParameter, ...]
    source: Any = None

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)


def _type_hints(fn: Callable[..., Any]) -> dict:
    try:
        return typing.get_type_hints(fn)
    except Exception:
        return {}


def analyze_constructor(fn: Callable[..., Any]) -> Constructor:
    sig = inspect.signature(fn)
    hints = _type_hints(fn)

    params: List[ConstructorParameter] = []
    for idx, (name, param) in enumerate(sig.parameters.items()):
        if idx == 0 and name in ("self", "cls"):
            continue
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        ann = hints.get(name, param.annotation)
        params.append(
            ConstructorParameter(
                name=name,
                annotation=None if ann is inspect.Parameter.empty else ann,
                kind=param.kind,
                has_default=param.default is not inspect.Parameter.empty,
                default=None if param.default is inspect.Parameter.empty else param.default,
            )
        )
    return Constructor(parameters=tuple(params), source=fn)


@dataclass(frozen=True)
class TypeDescriptor:
    """Introspection handle over a loaded class.

    Exposes the class name, whether it can be instantiated, its constructor
    signatures and the markers attached to it. Overloads of ``__init__``
    declared with :func:`typing.overload` count as separate constructors;
    otherwise ``__init__`` itself is the only one.
    """
    cls: type

    def __post_init__(self) -> None:
        if not isinstance(self.cls, type):
            raise TypeError(f"TypeDescriptor requires a class, got {self.cls!r}")

    @property
    def name(self) -> str:
        return self.cls.__name__

    @property
    def qualified_name(self) -> str:
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    @property
    def is_interface(self) -> bool:
        return bool(getattr(self.cls, "_is_protocol", False))

    @property
    def is_abstract(self) -> bool:
        return inspect.isabstract(self.cls)

    @property
    def is_concrete(self) -> bool:
        return not (self.is_interface or self.is_abstract)

    @property
    def markers(self) -> Tuple[Marker, ...]:
        return markers_of(self.cls)

    def constructors(self) -> Tuple[Constructor, ...]:
        init = self.cls.__init__
        if init is object.__init__:
            return (Constructor(parameters=(), source=init),)
        try:
            overloads = tuple(typing.get_overloads(init))
        except AttributeError:
            overloads = ()
        candidates = overloads or (init,)
        out: List[Constructor] = []
        for fn in candidates:
            try:
                out.append(analyze_constructor(fn))
            except (ValueError, TypeError):
                continue
        return tuple(out)
