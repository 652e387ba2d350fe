# nano_ioc/__init__.py
try:
    from ._version import __version__
except Exception:
    __version__ = "0.0.0"

from .analysis import Constructor, ConstructorParameter, TypeDescriptor
from .api import init
from .container import ApplicationContext, BeanState
from .decorators import (
    Marker, markers_of,
    component, service, repository, controller, configuration,
)
from .exceptions import (
    IocError,
    NamespaceNotFoundError,
    TypeLoadError,
    BeanDefinitionNotFoundError,
    BeanCreationError,
    CircularDependencyError,
    ContainerStateError,
)
from .naming import derive_name
from .registry import BeanDefinition, BeanDefinitionRegistry
from .scanner import Artifact, ImportlibTypeLoader, TypeLoader, walk

__all__ = [
    "__version__",
    "ApplicationContext",
    "BeanState",
    "BeanDefinition",
    "BeanDefinitionRegistry",
    "TypeDescriptor",
    "Constructor",
    "ConstructorParameter",
    "TypeLoader",
    "ImportlibTypeLoader",
    "Artifact",
    "walk",
    "init",
    "derive_name",
    "Marker",
    "markers_of",
    "component",
    "service",
    "repository",
    "controller",
    "configuration",
    "IocError",
    "NamespaceNotFoundError",
    "TypeLoadError",
    "BeanDefinitionNotFoundError",
    "BeanCreationError",
    "CircularDependencyError",
    "ContainerStateError",
]
