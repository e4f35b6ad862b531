"""Sort a list of integers in descending order and write it as text, XML or JSON."""

from numsort.core.exceptions import NumsortError, ParseError, UnsupportedFormatError
from numsort.core.models import OutputFormat, WriteResult
from numsort.core.pipeline import sort_and_write

__version__ = "0.1.0"
__all__ = [
    "sort_and_write",
    "OutputFormat",
    "WriteResult",
    "NumsortError",
    "ParseError",
    "UnsupportedFormatError",
]
