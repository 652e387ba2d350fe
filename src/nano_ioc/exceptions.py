"""Exception hierarchy for nano-ioc.

All container exceptions inherit from :class:`IocError`, making it easy to
catch any nano-ioc error with a single ``except IocError`` clause.
"""

from typing import Sequence


class IocError(Exception):
    """Base exception for all nano-ioc errors."""

    pass


class NamespaceNotFoundError(IocError):
    """Raised when the root namespace has no importable package or module.

    Attributes:
        namespace: The dotted namespace that could not be located.
    """

    def __init__(self, namespace: str):
        super().__init__(f"Namespace not found: '{namespace}'")
        self.namespace = namespace


class TypeLoadError(IocError):
    """Raised when a discovered module cannot be loaded during scanning.

    Attributes:
        qualified_name: The dotted name of the module that failed to load.
        cause: The original exception raised while importing it.
    """

    def __init__(self, qualified_name: str, cause: BaseException):
        super().__init__(f"Failed to load '{qualified_name}'; cause: {cause.__class__.__name__}: {cause}")
        self.qualified_name = qualified_name
        self.cause = cause


class BeanDefinitionNotFoundError(IocError):
    """Raised when a lookup names a bean that has no registered definition.

    Attributes:
        name: The registry key that was requested.
    """

    def __init__(self, name: str):
        super().__init__(f"No bean definition registered for name '{name}'")
        self.name = name


class BeanCreationError(IocError):
    """Raised when constructor selection or invocation fails for a bean.

    Failures while resolving a constructor argument bubble up wrapped in a
    ``BeanCreationError`` for every class on the path to the outermost lookup.

    Attributes:
        type_name: Qualified name of the class whose construction failed.
        cause: The original exception.
    """

    def __init__(self, type_name: str, cause: BaseException):
        super().__init__(f"Failed to create bean of type '{type_name}'; cause: {cause.__class__.__name__}: {cause}")
        self.type_name = type_name
        self.cause = cause

    @property
    def root_cause(self) -> BaseException:
        """The innermost non-``BeanCreationError`` cause."""
        cause = self.cause
        while isinstance(cause, BeanCreationError):
            cause = cause.cause
        return cause


class CircularDependencyError(IocError):
    """Raised when a bean (transitively) requires itself through its constructor.

    Attributes:
        chain: The names being resolved, outermost first, ending with the
            name that closed the cycle.
    """

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__("Circular dependency detected: " + " -> ".join(self.chain))


class ContainerStateError(IocError):
    """Raised when a container is used after its initialization failed.

    Attributes:
        cause: The error that aborted ``init()``.
    """

    def __init__(self, msg: str, cause: BaseException | None = None):
        super().__init__(msg)
        self.cause = cause
