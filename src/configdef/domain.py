"""Domain models used throughout the package."""

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class OptionAssignment:
    """A single entry in a definition's option log.

    Attributes:
        name: The option name, e.g. ``log-level``.
        value: The textual value, parsed only when the option is bound.
    """

    name: str
    value: str


@dataclass(frozen=True)
class Option:
    """Capability descriptor for one option exposed by an instantiable type.

    Attributes:
        name: The option name matched against :class:`OptionAssignment` names.
        parser: Converts the textual value into the type the setter expects.
        setter: Applies a parsed value to an instance.
        description: Human-readable help for the option.
        multiple: Whether repeated assignments accumulate rather than override.
        default: Value shown in help text; never applied to instances.
    """

    name: str
    parser: Callable[[str], Any]
    setter: Callable[[Any, Any], None]
    description: str = ""
    multiple: bool = False
    default: Any = None


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Represents an instantiable type registered under a string identifier.

    Attributes:
        identifier: The identifier slots refer to, e.g. ``pkg.FileLogger``.
        factory: Zero-argument callable producing a new instance.
        options: The options instances of this type accept, in declaration order.
        description: Optional one-line summary of the type.
    """

    identifier: str
    factory: Callable[[], Any]
    options: tuple[Option, ...] = field(default_factory=tuple)
    description: str = ""
