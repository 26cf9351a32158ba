"""
corrtab Exceptions
==================
Centralized exception hierarchy for the corrtab package.
"""


class CorrtabError(Exception):
    """Base class for all corrtab exceptions."""
    pass


class InvalidArgumentError(CorrtabError, ValueError):
    """Raised when a selector or option receives a value outside its accepted set."""
    pass


class DataIntegrityError(CorrtabError):
    """Raised when input data cannot be turned into a correlation matrix (e.g., no numeric columns)."""
    pass


class ConfigurationError(CorrtabError):
    """Raised when an options file cannot be read or does not hold a JSON object."""
    pass
