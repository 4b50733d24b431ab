"""Rendering of command line usage text for a configuration definition."""

from typing import Callable, TextIO

from configdef.definition import ConfigurationDefinition
from configdef.domain import TypeDescriptor
from configdef.help_formatter import format_option_help
from configdef.registry import TypeRegistry

__all__ = ["UsageRenderer"]


class UsageRenderer:
    """Describe the options each config object of a definition accepts."""

    def __init__(
        self,
        registry: TypeRegistry,
        formatter: Callable[[TypeDescriptor], str] = format_option_help,
    ):
        self._registry = registry
        self._formatter = formatter

    def render(self, definition: ConfigurationDefinition, sink: TextIO):
        """Write usage text for the definition to ``sink``.

        Types whose help text is empty are omitted. All types are resolved before
        anything is written, so a resolution failure leaves the sink untouched.

        Args:
            definition: The definition to describe; frozen as a side effect.
            sink: Any object with a ``write(str)`` method.

        Raises:
            ConfigurationError: If a type identifier cannot be resolved.
        """
        definition.freeze()

        blocks = []
        for slot_name, type_ids in definition.slots.items():
            for type_id in type_ids:
                option_help = self._formatter(self._registry.resolve(type_id, slot_name))
                # only describe objects which have options
                if option_help:
                    blocks.append(f"  {slot_name} options:\n{option_help}\n")

        sink.write(f"'{definition.name}' configuration: {definition.description}\n")
        sink.write("\n")
        for block in blocks:
            sink.write(block)
