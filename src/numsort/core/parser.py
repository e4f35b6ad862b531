"""Parsing of the delimited number list."""

import re

from numsort.core.constants import DEFAULT_DELIMITER, INTEGER_PATTERN, MAX_INTEGER_DIGITS
from numsort.core.exceptions import ParseError
from numsort.core.logging import get_logger

logger = get_logger("parser")

_INTEGER_RE = re.compile(INTEGER_PATTERN)


def parse_integer(token: str, position: int = 0) -> int:
    """
    Parse a single base-10 integer token.

    Only an optional leading sign followed by ASCII digits is accepted;
    surrounding whitespace, decimal points and empty tokens are rejected.

    Raises:
        ParseError: If the token is not a strict integer literal, or has more
            than MAX_INTEGER_DIGITS digits
    """
    if not _INTEGER_RE.fullmatch(token) or len(token.lstrip("+-")) > MAX_INTEGER_DIGITS:
        raise ParseError(token, position)
    try:
        return int(token)
    except ValueError as e:
        raise ParseError(token, position) from e


def parse_numbers(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[int]:
    """
    Split a delimited string into integers.

    Args:
        text: Tokens separated by the delimiter, e.g. "5,-2,9,0"
        delimiter: Token separator

    Returns:
        Integers in input order

    Raises:
        ParseError: On the first token that is not an integer
    """
    numbers = [
        parse_integer(token, position)
        for position, token in enumerate(text.split(delimiter))
    ]
    logger.debug("Parsed number list", extra={"count": len(numbers)})
    return numbers
