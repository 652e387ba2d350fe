from typing import Any, Dict, List, Tuple

from .analysis import Constructor, ConstructorParameter, TypeDescriptor
from .exceptions import BeanCreationError
from .naming import name_for


def select_constructor(descriptor: TypeDescriptor) -> Constructor:
    """Pick the constructor with the most parameters.

    Ties go to the first one declared; callers should not rely on which
    of two equally long signatures wins.
    """
    constructors = descriptor.constructors()
    if not constructors:
        raise TypeError(f"{descriptor.qualified_name} exposes no usable constructor")
    return max(constructors, key=lambda c: c.parameter_count)


def dependency_name(param: ConstructorParameter) -> str:
    if param.annotation is None:
        return param.name
    return name_for(param.annotation) or param.name


class _ResolutionMixin:
    def _resolve_args(self, constructor: Constructor) -> Tuple[List[Any], Dict[str, Any]]:
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        positional = True

        for param in constructor.parameters:
            key = dependency_name(param)
            if param.has_default and not self.has(key):
                if param.positional_only:
                    # Later positional-only arguments can only be reached by position.
                    args.append(param.default)
                else:
                    positional = False
                continue
            value = self.get(key)
            if param.keyword_only or not positional:
                kwargs[param.name] = value
            else:
                args.append(value)
        return args, kwargs

    def _construct(self, descriptor: TypeDescriptor) -> Any:
        try:
            constructor = select_constructor(descriptor)
            args, kwargs = self._resolve_args(constructor)
            return descriptor.cls(*args, **kwargs)
        except Exception as e:
            raise BeanCreationError(descriptor.qualified_name, e) from e
