__all__ = ["ConfigurationError"]


class ConfigurationError(Exception):
    """Raised when a configuration definition cannot be materialised or rendered.

    A single error type covers every failure: unknown type identifiers, factories
    that cannot be invoked or that raise, and option values that cannot be bound.
    The message names the offending slot, type identifier or option.
    """

    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.cause = cause
