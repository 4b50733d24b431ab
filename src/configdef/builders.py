"""High level entry points for materialising and describing definitions."""

import sys
from typing import Optional, TextIO

from configdef.configuration import Configuration, ConfigurationBuilder
from configdef.definition import ConfigurationDefinition
from configdef.registry import TypeRegistry, registry as default_registry
from configdef.usage import UsageRenderer

__all__ = ["make_configuration", "print_usage"]


def make_configuration(
    definition: ConfigurationDefinition,
    registry: Optional[TypeRegistry] = None,
) -> Configuration:
    """Construct and return a fully materialised :class:`Configuration`.

    Args:
        definition: The definition to materialise.
        registry: The registry used to resolve type identifiers. Defaults to the
            process-wide :data:`configdef.registry.registry`.

    Returns:
        The option-populated :class:`Configuration`.

    Raises:
        ConfigurationError: If a type cannot be found or instantiated, or an
            option cannot be bound.
    """
    return ConfigurationBuilder(
        registry if registry is not None else default_registry
    ).build(definition)


def print_usage(
    definition: ConfigurationDefinition,
    sink: Optional[TextIO] = None,
    registry: Optional[TypeRegistry] = None,
):
    """Write the usage text for a definition.

    Args:
        definition: The definition to describe.
        sink: Destination for the text; defaults to ``sys.stdout``.
        registry: The registry used to resolve type identifiers. Defaults to the
            process-wide :data:`configdef.registry.registry`.

    Raises:
        ConfigurationError: If a type identifier cannot be resolved.
    """
    UsageRenderer(registry if registry is not None else default_registry).render(
        definition, sink if sink is not None else sys.stdout
    )
