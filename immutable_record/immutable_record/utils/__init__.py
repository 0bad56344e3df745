"""Value kinds, sentinels and logging helpers."""

from .logging_utils import configure_split_stream_logging
from .value_types import NO_DEFAULT, UNDEFINED, format_value, kind_of

__all__ = [
    "configure_split_stream_logging",
    "NO_DEFAULT",
    "UNDEFINED",
    "format_value",
    "kind_of",
]
