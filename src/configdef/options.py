"""Declarative option descriptors for configuration object classes.

Options are attached to a class with the :func:`option` decorator and are picked
up by :meth:`configdef.registry.TypeRegistry.provides` when the class is
registered:

    >>> @registry.provides("pkg.FileLogger")
    ... @option("log-level", description="Minimum level to log")
    ... @option("path", default="/tmp/log.txt")
    ... class FileLogger:
    ...     pass
"""

from typing import Any, Callable, Optional

from configdef.domain import Option

__all__ = ["option", "declared_options", "attribute_setter"]

OPTIONS_ATTRIBUTE = "__configdef_options__"


def attribute_setter(attribute: str, multiple: bool = False) -> Callable[[Any, Any], None]:
    """Build a setter which writes to ``attribute`` on the target instance.

    Args:
        attribute: Name of the instance attribute to write.
        multiple: If True, values are appended to a list held in the attribute
            (created on first use) rather than replacing the previous value.

    Returns:
        A callable taking ``(instance, value)``.
    """

    def set_value(instance: Any, value: Any) -> None:
        if not multiple:
            setattr(instance, attribute, value)
            return
        values = vars(instance).get(attribute)
        if values is None:
            # class-level defaults are copied, never mutated
            values = list(getattr(type(instance), attribute, ()) or ())
            setattr(instance, attribute, values)
        values.append(value)

    return set_value


def option(
    name: str,
    parser: Callable[[str], Any] = str,
    attribute: Optional[str] = None,
    description: str = "",
    multiple: bool = False,
    default: Any = None,
    setter: Optional[Callable[[Any, Any], None]] = None,
) -> Callable:
    """Class decorator declaring an option the class accepts.

    Args:
        name: The option name as it appears in a definition's option log.
        parser: Converts the textual value; defaults to ``str``.
        attribute: Attribute to write; defaults to ``name`` with dashes replaced
            by underscores. Ignored if ``setter`` is given.
        description: Help text for the option.
        multiple: Accumulate repeated assignments into a list instead of overriding.
        default: Value documented in help text.
        setter: Custom ``(instance, value)`` callable replacing the attribute setter.

    Returns:
        A decorator returning the class unchanged apart from its option metadata.
    """

    def decorator(target: type) -> type:
        declared = Option(
            name,
            parser,
            setter or attribute_setter(attribute or name.replace("-", "_"), multiple),
            description,
            multiple,
            default,
        )
        # Decorators apply bottom-up; prepend so the list reads top-to-bottom.
        existing = target.__dict__.get(OPTIONS_ATTRIBUTE, ())
        setattr(target, OPTIONS_ATTRIBUTE, (declared,) + tuple(existing))
        return target

    return decorator


def declared_options(target: Any) -> tuple[Option, ...]:
    """Return the options declared on ``target`` and its base classes.

    Base class options come first; an option redeclared in a subclass replaces
    the inherited one of the same name.
    """
    if not isinstance(target, type):
        return tuple(getattr(target, OPTIONS_ATTRIBUTE, ()))

    by_name: dict[str, Option] = {}
    for klass in reversed(target.__mro__):
        for declared in klass.__dict__.get(OPTIONS_ATTRIBUTE, ()):
            by_name[declared.name] = declared
    return tuple(by_name.values())
