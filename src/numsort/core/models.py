"""Data models for numsort."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from numsort.core.constants import OUTPUT_BASENAME
from numsort.core.exceptions import UnsupportedFormatError


class OutputFormat(str, Enum):
    """Serialization formats the sorted numbers can be written in."""

    TEXT = "text"
    XML = "xml"
    JSON = "json"

    @classmethod
    def from_token(cls, token: str) -> "OutputFormat":
        """
        Resolve a user-supplied format token, ignoring case.

        Raises:
            UnsupportedFormatError: If the token names no known format
        """
        if isinstance(token, cls):
            return token
        normalized = token.lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedFormatError(token, supported=cls.names())

    @classmethod
    def names(cls) -> list[str]:
        """Upper-case names of all formats, in declaration order."""
        return [member.name for member in cls]

    @property
    def extension(self) -> str:
        """File extension, the lower-case format name."""
        return self.value

    @property
    def file_name(self) -> str:
        """Output file name for this format."""
        return f"{OUTPUT_BASENAME}.{self.extension}"


class WriteResult(BaseModel):
    """Outcome of a successful sort-and-write run."""

    path: Path = Field(..., description="Location of the written file")
    format: OutputFormat = Field(..., description="Format the file was written in")
    numbers: list[int] = Field(
        default_factory=list,
        description="Numbers as written, in descending order",
    )

    @property
    def count(self) -> int:
        """Number of values written."""
        return len(self.numbers)

    @property
    def file_name(self) -> str:
        """Base name of the written file."""
        return self.path.name
