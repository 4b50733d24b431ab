"""Formatting of option help text for a registered type."""

from configdef.domain import Option, TypeDescriptor

__all__ = ["format_option_help"]


def format_option_help(descriptor: TypeDescriptor) -> str:
    """Describe the options accepted by instances of a type.

    Args:
        descriptor: The type whose options are described.

    Returns:
        One line per option, each terminated by a newline, or an empty string if
        the type declares no options.

    Example:
        >>> format_option_help(file_logger)
        '    --log-level: Minimum level to log. Default: INFO.\\n'
    """
    return "".join(f"    {_describe(declared)}\n" for declared in descriptor.options)


def _describe(declared: Option) -> str:
    text = f"--{declared.name}:"
    if declared.description:
        text += f" {declared.description.rstrip('.')}."
    if declared.default is not None:
        text += f" Default: {declared.default}."
    if declared.multiple:
        text += " May be repeated."
    return text
