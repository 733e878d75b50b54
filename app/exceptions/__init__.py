from .common import (
    ComposerError,
    ContentTypeMissingError,
    MalformedUrlError,
    UnexpectedError,
)

__all__ = [
    "ComposerError",
    "ContentTypeMissingError",
    "MalformedUrlError",
    "UnexpectedError",
]
