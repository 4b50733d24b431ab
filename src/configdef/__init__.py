"""Configuration definitions materialised into live object graphs.

A configuration definition names a set of slots, binds each slot to one or more
type identifiers, and records option assignments as text. Materialising the
definition resolves each identifier against an explicit registry of factories,
instantiates the types in declaration order, and applies the options in the
order they were recorded. Any failure aborts the whole materialisation.

Basic Usage:
    >>> from configdef.registry import registry
    >>> from configdef.options import option
    >>> from configdef.definition import ConfigurationDefinition
    >>> from configdef.builders import make_configuration
    >>>
    >>> @registry.provides("pkg.FileLogger")
    ... @option("log-level", default="INFO")
    ... class FileLogger:
    ...     pass
    >>>
    >>> definition = ConfigurationDefinition("test")
    >>> definition.add_slot_entry("logger", "pkg.FileLogger")
    >>> definition.add_option("log-level", "DEBUG")
    >>> make_configuration(definition)["logger"][0].log_level
    'DEBUG'

The package consists of several modules:
    - definition: The slot registry and option assignment log
    - registry: Type registration, resolution and instantiation
    - options: Declarative option descriptors
    - option_binder: Application of option assignments to objects
    - help_formatter: Option help text
    - configuration: Configuration containers and materialisation logic
    - usage: Usage text rendering
    - builders: High-level entry points
    - domain: Core domain models (OptionAssignment, Option, TypeDescriptor)
    - errors: Package-specific exceptions
"""
