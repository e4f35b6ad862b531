"""Output writers for the sorted numbers.

Each supported format maps to a pure render function that turns the
numbers into the complete file payload. The payload is built in memory
before the output file is opened, so a failed render never leaves a
partial file behind.
"""

from pathlib import Path
from typing import Callable

from lxml import etree
from pydantic import TypeAdapter

from numsort.core.config import Settings, get_settings
from numsort.core.constants import OUTPUT_ENCODING, XML_ITEM_TAG, XML_ROOT_TAG
from numsort.core.exceptions import OutputWriteError
from numsort.core.logging import get_logger
from numsort.core.models import OutputFormat

logger = get_logger("writers")

Renderer = Callable[[list[int], Settings], bytes]

_INT_LIST = TypeAdapter(list[int])


def format_text(numbers: list[int], settings: Settings | None = None) -> bytes:
    """
    Format numbers as plain text.

    One decimal integer per line, every line newline-terminated.
    """
    return "".join(f"{n}\n" for n in numbers).encode(OUTPUT_ENCODING)


def format_xml(numbers: list[int], settings: Settings | None = None) -> bytes:
    """
    Format numbers as an XML document.

    Args:
        numbers: Values in the order they should appear
        settings: Optional settings; controls indentation

    Returns:
        UTF-8 document with a Numbers root and one Number child per value
    """
    settings = settings or get_settings()
    root = etree.Element(XML_ROOT_TAG)
    for n in numbers:
        etree.SubElement(root, XML_ITEM_TAG).text = str(n)
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding=OUTPUT_ENCODING,
        pretty_print=settings.xml_pretty_print,
    )


def format_json(numbers: list[int], settings: Settings | None = None) -> bytes:
    """Format numbers as a compact JSON array, e.g. ``[10,0,-5]``."""
    return _INT_LIST.dump_json(numbers)


RENDERERS: dict[OutputFormat, Renderer] = {
    OutputFormat.TEXT: format_text,
    OutputFormat.XML: format_xml,
    OutputFormat.JSON: format_json,
}


def get_renderer(output_format: OutputFormat | str) -> Renderer:
    """
    Return the render function for a format or format token.

    Raises:
        UnsupportedFormatError: If the token names no known format
    """
    return RENDERERS[OutputFormat.from_token(output_format)]


def render_numbers(
    numbers: list[int],
    output_format: OutputFormat | str,
    settings: Settings | None = None,
) -> bytes:
    """Serialize numbers in the requested format."""
    settings = settings or get_settings()
    return get_renderer(output_format)(numbers, settings)


def write_numbers(
    numbers: list[int],
    output_format: OutputFormat | str,
    output_dir: Path | None = None,
    settings: Settings | None = None,
) -> Path:
    """
    Write numbers to ``SortedNumbers.<format>``, replacing any existing file.

    Args:
        numbers: Values in the order they should be written
        output_format: Format member or case-insensitive format token
        output_dir: Target directory (defaults to settings.output_dir)
        settings: Optional settings

    Returns:
        Path of the written file

    Raises:
        UnsupportedFormatError: If the token names no known format
        OutputWriteError: If the file cannot be written
    """
    settings = settings or get_settings()
    fmt = OutputFormat.from_token(output_format)
    payload = RENDERERS[fmt](numbers, settings)

    path = Path(output_dir if output_dir is not None else settings.output_dir) / fmt.file_name
    try:
        path.write_bytes(payload)
    except OSError as e:
        raise OutputWriteError(str(path), cause=e) from e

    logger.info(
        "Wrote output file",
        extra={"path": str(path), "bytes": len(payload), "count": len(numbers)},
    )
    return path
