# src/nano_ioc/container.py
import contextvars
import enum
import logging
from typing import Any, Optional, Tuple, Type, TypeVar, Union

from .analysis import TypeDescriptor
from .constants import LOGGER
from .container_resolution import _ResolutionMixin
from .core_policy import is_eligible
from .exceptions import (
    BeanDefinitionNotFoundError,
    CircularDependencyError,
    ContainerStateError,
)
from .naming import derive_name
from .registry import BeanDefinition, BeanDefinitionRegistry
from .scanner import ImportlibTypeLoader, TypeLoader, walk
from .singletons import SingletonCache

T = TypeVar("T")

_resolve_chain: contextvars.ContextVar[Tuple[str, ...]] = contextvars.ContextVar("nano_resolve_chain", default=())


class BeanState(enum.Enum):
    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    INSTANTIATED = "instantiated"


class ApplicationContext(_ResolutionMixin):
    """Scans a root package for components and hands out one instance per name.

    ``init()`` walks the package once and registers every eligible class
    under its derived name; ``get()`` builds beans on first request,
    resolving constructor parameters through ``get()`` as well, and caches
    them for the lifetime of the container.

    Lookups may be issued from several threads. Creation runs under a single
    re-entrant lock with a double-checked cache lookup, so a name is never
    constructed twice.
    """

    def __init__(self, root_namespace: str, *, loader: Optional[TypeLoader] = None, logger: Optional[logging.Logger] = None) -> None:
        self.root_namespace = root_namespace
        self._loader = loader or ImportlibTypeLoader()
        self._logger = logger or LOGGER
        self._registry = BeanDefinitionRegistry(self._logger)
        self._singletons = SingletonCache()
        self._initialized = False
        self._init_error: Optional[BaseException] = None

    def __repr__(self) -> str:
        return f"ApplicationContext(root_namespace={self.root_namespace!r}, beans={len(self._registry)})"

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self) -> "ApplicationContext":
        """Scan the root namespace and register every eligible class.

        Definitions are staged and only become visible once the whole scan
        has succeeded. Calling ``init()`` again after success does nothing.

        Raises:
            NamespaceNotFoundError: If the root namespace does not exist.
            TypeLoadError: If a module under it fails to import.
            ContainerStateError: If a previous ``init()`` failed.
        """
        self._check_usable()
        if self._initialized:
            self._logger.debug("Container for '%s' already initialized", self.root_namespace)
            return self

        staged = BeanDefinitionRegistry(self._logger)
        staged.update(self._registry)
        scanned = 0
        try:
            for qualified_name, descriptor in walk(self.root_namespace, self._loader):
                scanned += 1
                if not is_eligible(descriptor):
                    continue
                name = derive_name(descriptor.name)
                staged.register(name, descriptor)
                self._logger.debug("Registered bean '%s' -> %s", name, qualified_name)
        except Exception as e:
            self._init_error = e
            self._logger.error("Initialization of '%s' failed: %s", self.root_namespace, e)
            raise

        with self._singletons.lock:
            self._registry = staged
            self._initialized = True
        self._logger.info(
            "Initialized '%s': %d classes scanned, %d beans registered",
            self.root_namespace, scanned, len(staged),
        )
        return self

    def register_bean(self, name: str, bean_type: Union[type, TypeDescriptor]) -> BeanDefinition:
        """Register *bean_type* under *name* directly, bypassing the scan.

        The class does not need to carry a marker or live under the root
        namespace. An existing definition with the same name is replaced;
        an already created instance is not.
        """
        if not name:
            raise ValueError("Bean name must be a non-empty string")
        descriptor = bean_type if isinstance(bean_type, TypeDescriptor) else TypeDescriptor(bean_type)
        with self._singletons.lock:
            return self._registry.register(name, descriptor)

    def _check_usable(self) -> None:
        if self._init_error is not None:
            raise ContainerStateError(
                f"Container for '{self.root_namespace}' is unusable: init() failed", self._init_error
            ) from self._init_error

    def get(self, name: str, expected_type: Optional[Type[T]] = None) -> T:
        """Return the singleton bean registered as *name*, creating it on first use.

        Args:
            name: The registry key, e.g. ``"myShopRepository"``.
            expected_type: If given, the bean must be an instance of it.

        Raises:
            BeanDefinitionNotFoundError: If nothing is registered as *name*.
            BeanCreationError: If the bean or one of its dependencies fails
                to construct. Nothing is cached in that case.
            CircularDependencyError: If *name* is requested while it is
                already being constructed in the current context.
            ContainerStateError: If ``init()`` previously failed.
        """
        self._check_usable()
        if name in self._singletons:
            return self._checked(name, self._singletons.get(name), expected_type)

        chain = _resolve_chain.get()
        if name in chain:
            raise CircularDependencyError(chain + (name,))

        with self._singletons.lock:
            if name in self._singletons:
                return self._checked(name, self._singletons.get(name), expected_type)

            definition = self._registry.lookup(name)
            if definition is None:
                raise BeanDefinitionNotFoundError(name)

            token = _resolve_chain.set(chain + (name,))
            try:
                instance = self._construct(definition.type_descriptor)
            finally:
                _resolve_chain.reset(token)

            instance = self._singletons.put(name, instance)
            self._logger.debug("Instantiated bean '%s' (%s)", name, definition.type_descriptor.qualified_name)

        return self._checked(name, instance, expected_type)

    @staticmethod
    def _checked(name: str, instance: Any, expected_type: Optional[type]) -> Any:
        if expected_type is not None and not isinstance(instance, expected_type):
            raise TypeError(
                f"Bean '{name}' is a {type(instance).__name__}, not a {getattr(expected_type, '__name__', expected_type)}"
            )
        return instance

    def has(self, name: str) -> bool:
        """True if *name* has a definition or a cached instance."""
        return name in self._registry or name in self._singletons

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def definition_names(self) -> Tuple[str, ...]:
        return self._registry.names()

    def get_definition(self, name: str) -> Optional[BeanDefinition]:
        return self._registry.lookup(name)

    def state_of(self, name: str) -> BeanState:
        if name in self._singletons:
            return BeanState.INSTANTIATED
        if name in self._registry:
            return BeanState.REGISTERED
        return BeanState.UNREGISTERED
