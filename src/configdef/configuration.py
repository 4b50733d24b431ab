"""
Module for materialising configuration definitions into live object graphs.

A :class:`ConfigurationBuilder` resolves each type identifier bound to a slot,
instantiates it, and then applies the definition's option log to the resulting
objects. Materialisation is all-or-nothing: if any type cannot be resolved or
instantiated, or any option cannot be bound, a
:class:`~configdef.errors.ConfigurationError` is raised and no objects escape.
"""

import logging
from typing import Any, Iterator, Mapping, Optional

from configdef.definition import ConfigurationDefinition
from configdef.domain import TypeDescriptor
from configdef.option_binder import OptionBinder
from configdef.registry import TypeRegistry

__all__ = ["Configuration", "ConfigurationBuilder"]

logger = logging.getLogger(__name__)


class Configuration:
    """
    A container of materialised configuration objects, keyed by slot name.

    Each slot holds its objects in the order their type identifiers were declared.
    Slots are iterated in declaration order.
    """

    def __init__(self, name: str, objects: Mapping[str, tuple[Any, ...]]):
        self.name = name
        self._objects = dict(objects)

    def __getitem__(self, slot_name: str) -> tuple[Any, ...]:
        return self._objects[slot_name]

    def __contains__(self, slot_name: str) -> bool:
        return slot_name in self._objects

    def __iter__(self) -> Iterator[str]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def get(self, slot_name: str, default: Any = None) -> Any:
        """Return the first object in a slot, or ``default`` if the slot is absent."""
        objects = self._objects.get(slot_name)
        return objects[0] if objects else default

    def all_objects(self) -> tuple[Any, ...]:
        """All objects, in slot order and then declaration order within each slot."""
        return tuple(obj for objects in self._objects.values() for obj in objects)

    def __repr__(self) -> str:
        slots = ", ".join(f"{name}={len(objs)}" for name, objs in self._objects.items())
        return f"Configuration(name={self.name!r}, {slots})"


class ConfigurationBuilder:
    """Instantiate configuration objects from a :class:`ConfigurationDefinition`."""

    def __init__(self, registry: TypeRegistry, binder: Optional[OptionBinder] = None):
        self._registry = registry
        self._binder = binder or OptionBinder()

    def build(self, definition: ConfigurationDefinition) -> Configuration:
        """Materialise all objects declared by the definition and apply its options.

        The definition is frozen before anything is resolved.

        Args:
            definition: The definition to materialise.

        Returns:
            A :class:`Configuration` holding the option-populated objects.

        Raises:
            ConfigurationError: If a type cannot be found or instantiated, or an
                option cannot be bound.
        """
        definition.freeze()

        built: dict[str, tuple[Any, ...]] = {}
        targets: list[tuple[Any, TypeDescriptor]] = []

        for slot_name, type_ids in definition.slots.items():
            slot_objects = []
            for type_id in type_ids:
                descriptor = self._registry.resolve(type_id, slot_name)
                instance = self._registry.instantiate(descriptor, slot_name)
                slot_objects.append(instance)
                targets.append((instance, descriptor))
            built[slot_name] = tuple(slot_objects)

        self._binder.bind(targets, definition.options)

        logger.debug(
            "Materialised configuration '%s' with %d objects in %d slots",
            definition.name,
            len(targets),
            len(built),
        )
        return Configuration(definition.name, built)
