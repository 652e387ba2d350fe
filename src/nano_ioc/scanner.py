"""Namespace walking: discovers classes under a root package.

The walker relies on a :class:`TypeLoader` to list and import modules, so
it works the same whether packages live in a directory tree, a namespace
package or a zip archive on ``sys.path``.
"""

import importlib
import importlib.util
import inspect
import pkgutil
from typing import Iterable, Iterator, List, NamedTuple, Optional, Protocol, Tuple

from .analysis import TypeDescriptor
from .constants import LOGGER, NESTED_DELIMITERS
from .exceptions import NamespaceNotFoundError, TypeLoadError


class Artifact(NamedTuple):
    name: str
    is_namespace: bool


class TypeLoader(Protocol):
    """Host capability used by :func:`walk` to enumerate and load modules."""

    def list_artifacts(self, namespace: str) -> Optional[List[Artifact]]:
        """Direct children of *namespace*, ``[]`` for a plain module, ``None`` if it does not exist."""
        ...

    def load_types(self, qualified_name: str) -> List[type]:
        """Import the module *qualified_name* and return the classes it defines, in definition order."""
        ...


class ImportlibTypeLoader:
    """Default :class:`TypeLoader` backed by ``importlib`` and ``pkgutil``."""

    def list_artifacts(self, namespace: str) -> Optional[List[Artifact]]:
        try:
            spec = importlib.util.find_spec(namespace)
        except ModuleNotFoundError as e:
            # Any other missing module is an import failure inside an existing package.
            if e.name and (namespace == e.name or namespace.startswith(e.name + ".")):
                return None
            raise
        except ValueError:
            return None
        if spec is None:
            return None
        locations = spec.submodule_search_locations
        if locations is None:
            return []
        found = {name: ispkg for _, name, ispkg in pkgutil.iter_modules(list(locations))}
        return [Artifact(name, found[name]) for name in sorted(found)]

    def load_types(self, qualified_name: str) -> List[type]:
        module = importlib.import_module(qualified_name)
        return [
            obj for obj in vars(module).values()
            if inspect.isclass(obj) and obj.__module__ == module.__name__
        ]


def is_nested(cls: type) -> bool:
    qualname = getattr(cls, "__qualname__", cls.__name__)
    return any(d in qualname for d in NESTED_DELIMITERS)


def _load(loader: TypeLoader, qualified_name: str) -> Iterable[type]:
    try:
        return loader.load_types(qualified_name)
    except Exception as e:
        raise TypeLoadError(qualified_name, e) from e


def _children(loader: TypeLoader, namespace: str) -> Optional[List[Artifact]]:
    try:
        return loader.list_artifacts(namespace)
    except Exception as e:
        raise TypeLoadError(namespace, e) from e


def _walk_module(loader: TypeLoader, module_name: str) -> Iterator[Tuple[str, TypeDescriptor]]:
    for cls in _load(loader, module_name):
        if is_nested(cls):
            LOGGER.debug("Skipping nested class %s.%s", module_name, cls.__qualname__)
            continue
        yield f"{module_name}.{cls.__qualname__}", TypeDescriptor(cls)


def _walk_namespace(loader: TypeLoader, namespace: str, children: List[Artifact]) -> Iterator[Tuple[str, TypeDescriptor]]:
    for artifact in children:
        current = f"{namespace}.{artifact.name}"
        yield from _walk_module(loader, current)
        if artifact.is_namespace:
            yield from _walk_namespace(loader, current, _children(loader, current) or [])


def walk(root_namespace: str, loader: Optional[TypeLoader] = None) -> Iterator[Tuple[str, TypeDescriptor]]:
    """Yield ``(qualified_name, descriptor)`` for every top-level class under *root_namespace*.

    The generator is lazy and single-use. Modules are visited depth first in
    name order; nested and function-local classes are skipped.

    Raises:
        NamespaceNotFoundError: If *root_namespace* cannot be located.
        TypeLoadError: If any discovered module fails to import.
    """
    loader = loader or ImportlibTypeLoader()
    children = _children(loader, root_namespace)
    if children is None:
        raise NamespaceNotFoundError(root_namespace)
    LOGGER.debug("Scanning namespace '%s'", root_namespace)
    yield from _walk_module(loader, root_namespace)
    yield from _walk_namespace(loader, root_namespace, children)
