from .exceptions import (
    ConfigurationError,
    CorrtabError,
    DataIntegrityError,
    InvalidArgumentError,
)
from .options import RenderOptions, match_arg

__all__ = [
    "CorrtabError",
    "InvalidArgumentError",
    "DataIntegrityError",
    "ConfigurationError",
    "RenderOptions",
    "match_arg",
]
