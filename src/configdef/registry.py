"""Registration and lookup of instantiable configuration object types.

The registry maps string type identifiers to zero-argument factories. Types are
registered explicitly, usually at import time through the
:meth:`TypeRegistry.provides` decorator; nothing is discovered by scanning
modules or class paths.
"""

import inspect
import logging
from typing import Any, Callable, Iterable, Optional

from configdef.domain import Option, TypeDescriptor
from configdef.errors import ConfigurationError
from configdef.options import declared_options

__all__ = ["TypeRegistry", "inferred_identifier", "registry"]

logger = logging.getLogger(__name__)


def inferred_identifier(target: Any) -> str:
    """Derive a type identifier from a class or factory function.

    Args:
        target: The class or function being registered.

    Returns:
        ``module.QualifiedName`` for classes, or the function name with any
        'make_' prefix removed.

    Example:
        >>> inferred_identifier(FileLogger)        # Returns "pkg.FileLogger"
        >>> inferred_identifier(make_file_logger)  # Returns "file_logger"
    """
    if inspect.isclass(target):
        return f"{target.__module__}.{target.__qualname__}"

    if target.__name__.startswith("make_"):
        return target.__name__[5:]
    else:
        return target.__name__


class TypeRegistry:
    """Registry of type descriptors, resolving identifiers and creating instances."""

    def __init__(self):
        self._types: dict[str, TypeDescriptor] = {}

    def register(self, descriptor: TypeDescriptor):
        """Register a type descriptor explicitly.

        Args:
            descriptor: The descriptor to register.

        Raises:
            ConfigurationError: If the identifier is already registered.
        """
        if descriptor.identifier in self._types:
            raise ConfigurationError(
                f"Duplicate type identifier '{descriptor.identifier}' "
                f"for factories {self._types[descriptor.identifier].factory} "
                f"and {descriptor.factory}"
            )
        logger.debug("Registering type %s", descriptor.identifier)
        self._types[descriptor.identifier] = descriptor

    def registered_types(self) -> list[TypeDescriptor]:
        return list(self._types.values())

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._types

    def provides(
        self,
        identifier: Optional[str] = None,
        options: Optional[Iterable[Option]] = None,
        description: Optional[str] = None,
    ) -> Callable:
        """Decorator to register a class or zero-argument function as a type.

        Args:
            identifier: Optional identifier to register under; defaults to the
                class's qualified name, or the function name with 'make_' removed.
            options: Additional options, appended after any declared on the class
                with :func:`configdef.options.option`.
            description: Optional summary; defaults to the first docstring line.

        Returns:
            A decorator that registers its target and returns it unchanged.

        Example:
            @registry.provides("pkg.FileLogger")
            @option("log-level")
            class FileLogger:
                pass
        """

        def decorator(obj):
            if not (inspect.isclass(obj) or inspect.isfunction(obj)):
                raise ConfigurationError(f"{obj} is not a class or function")
            _check_zero_argument(obj)

            self.register(
                TypeDescriptor(
                    identifier or inferred_identifier(obj),
                    obj,
                    declared_options(obj) + tuple(options or ()),
                    description if description is not None else _summary_of(obj),
                )
            )
            return obj

        return decorator

    def resolve(self, type_id: str, object_name: Optional[str] = None) -> TypeDescriptor:
        """Look up the descriptor registered under ``type_id``.

        Args:
            type_id: The identifier to resolve.
            object_name: Optional slot name, included in the error message.

        Raises:
            ConfigurationError: If no type is registered under the identifier.
        """
        try:
            return self._types[type_id]
        except KeyError:
            raise ConfigurationError(
                f"Could not find type {type_id}{_for_object(object_name)}"
            ) from None

    def instantiate(self, descriptor: TypeDescriptor, object_name: Optional[str] = None) -> Any:
        """Create a new instance by calling the descriptor's factory with no arguments.

        Args:
            descriptor: The resolved type to instantiate.
            object_name: Optional slot name, included in the error message.

        Raises:
            ConfigurationError: If the factory is not callable or raises.
        """
        if not callable(descriptor.factory):
            raise ConfigurationError(
                f"Could not access type {descriptor.identifier}{_for_object(object_name)}"
            )
        try:
            instance = descriptor.factory()
        except Exception as e:
            raise ConfigurationError(
                f"Could not instantiate type {descriptor.identifier}"
                f"{_for_object(object_name)}: {e}",
                e,
            ) from e
        logger.debug("Instantiated %s%s", descriptor.identifier, _for_object(object_name))
        return instance


def _for_object(object_name: Optional[str]) -> str:
    return f" for config object name {object_name}" if object_name is not None else ""


def _check_zero_argument(obj: Callable):
    try:
        sig = inspect.signature(obj)
    except (TypeError, ValueError):
        return

    required = [
        name
        for name, param in sig.parameters.items()
        if param.default is inspect.Parameter.empty
        and param.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if required:
        raise ConfigurationError(
            f"Factory <{obj.__name__}> must be callable without arguments, "
            f"but requires {required}"
        )


def _summary_of(obj: Any) -> str:
    lines = inspect.cleandoc(obj.__doc__).splitlines() if obj.__doc__ else []
    return lines[0] if lines else ""


registry = TypeRegistry()
"""Process-wide default registry, used when no registry is passed explicitly."""
