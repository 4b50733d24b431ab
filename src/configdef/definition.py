"""Named configuration definitions: slots bound to type identifiers, plus an option log.

A definition is populated by appending slot entries and option assignments, then
consumed by materialising it into a :class:`~configdef.configuration.Configuration`
or rendering its usage text. The first consumption freezes the definition; later
appends raise :class:`~configdef.errors.ConfigurationError`.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from configdef.domain import OptionAssignment
from configdef.errors import ConfigurationError

__all__ = ["ConfigurationDefinition"]

logger = logging.getLogger(__name__)


class ConfigurationDefinition:
    """Record of a configuration: its config object types and their options.

    Slots keep insertion order, as do the type identifiers within each slot; both
    determine the order in which objects are created and options are applied.

    Example:
        >>> definition = ConfigurationDefinition("test")
        >>> definition.add_slot_entry("logger", "pkg.FileLogger")
        >>> definition.add_option("log-level", "DEBUG")
        >>> definition.slots["logger"]
        ('pkg.FileLogger',)
    """

    def __init__(self, name: str):
        self._name = name
        self._description = ""
        self._slots: dict[str, list[str]] = {}
        self._options: list[OptionAssignment] = []
        self._frozen = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, text: str):
        self._check_not_frozen()
        self._description = text

    @property
    def slots(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of slot names to type identifiers, in the order appended."""
        return MappingProxyType(
            {slot_name: tuple(type_ids) for slot_name, type_ids in self._slots.items()}
        )

    @property
    def options(self) -> tuple[OptionAssignment, ...]:
        """The option log, in the order appended, duplicates included."""
        return tuple(self._options)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_slot_entry(self, slot_name: str, type_id: str):
        """Append a type identifier to a slot, creating the slot if absent.

        Args:
            slot_name: The config object name, e.g. ``logger``.
            type_id: Identifier of the type to instantiate for the slot.
        """
        self._check_not_frozen()
        self._slots.setdefault(slot_name, []).append(type_id)

    def add_option(self, option_name: str, value: str):
        """Append an option assignment to the log.

        Args:
            option_name: The name of the option.
            value: The textual option value.
        """
        self._check_not_frozen()
        self._options.append(OptionAssignment(option_name, value))

    def freeze(self):
        """Mark the build phase as over. Idempotent."""
        if not self._frozen:
            logger.debug("Freezing configuration definition '%s'", self._name)
            self._frozen = True

    def _check_not_frozen(self):
        if self._frozen:
            raise ConfigurationError(
                f"Configuration definition '{self._name}' is frozen "
                "and cannot be modified after it has been materialised or rendered"
            )

    def __repr__(self) -> str:
        return (
            f"ConfigurationDefinition(name={self._name!r}, "
            f"slots={len(self._slots)}, options={len(self._options)})"
        )
