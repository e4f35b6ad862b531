"""Core components: parsing, sorting, configuration and errors."""

from numsort.core.config import Settings, get_settings
from numsort.core.exceptions import (
    ConfigurationError,
    NumsortError,
    OutputWriteError,
    ParseError,
    UnsupportedFormatError,
)
from numsort.core.models import OutputFormat, WriteResult
from numsort.core.parser import parse_integer, parse_numbers
from numsort.core.sorter import sort_descending

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "OutputFormat",
    "WriteResult",
    # Parsing and sorting
    "parse_integer",
    "parse_numbers",
    "sort_descending",
    # Exceptions
    "NumsortError",
    "ParseError",
    "UnsupportedFormatError",
    "OutputWriteError",
    "ConfigurationError",
]
