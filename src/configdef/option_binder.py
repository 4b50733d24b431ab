"""Binding of a definition's option log onto instantiated configuration objects."""

import logging
from collections import defaultdict
from typing import Any, Iterable, Sequence

from configdef.domain import Option, OptionAssignment, TypeDescriptor
from configdef.errors import ConfigurationError

__all__ = ["OptionBinder"]

logger = logging.getLogger(__name__)


class OptionBinder:
    """Apply option assignments to the options declared by a set of objects.

    When several objects declare an option of the same name, every assignment to
    that name is applied to all of them, in the order the objects were given.
    """

    def bind(
        self,
        targets: Sequence[tuple[Any, TypeDescriptor]],
        assignments: Iterable[OptionAssignment],
    ) -> None:
        """Apply each assignment, in order, to every target declaring the option.

        Args:
            targets: Instances paired with the descriptor they were created from.
            assignments: The option log, applied strictly in sequence.

        Raises:
            ConfigurationError: If an option name is unknown to every target, or a
                value cannot be parsed or set.
        """
        options_by_name: dict[str, list[tuple[Any, Option]]] = defaultdict(list)
        for instance, descriptor in targets:
            for declared in descriptor.options:
                options_by_name[declared.name].append((instance, declared))

        for assignment in assignments:
            bound = options_by_name.get(assignment.name)
            if not bound:
                raise ConfigurationError(
                    f"Could not find option with name {assignment.name}"
                )
            for instance, declared in bound:
                _apply(instance, declared, assignment)


def _apply(instance: Any, declared: Option, assignment: OptionAssignment):
    try:
        value = declared.parser(assignment.value)
    except Exception as e:
        raise ConfigurationError(
            f"Could not parse value '{assignment.value}' for option {assignment.name}: {e}",
            e,
        ) from e
    try:
        declared.setter(instance, value)
    except Exception as e:
        raise ConfigurationError(
            f"Could not set value '{assignment.value}' for option {assignment.name}: {e}",
            e,
        ) from e
    logger.debug(
        "Set option %s=%r on %s", assignment.name, assignment.value, type(instance).__name__
    )
