"""Parse, sort and write pipeline."""

from pathlib import Path

from numsort.core.config import Settings, get_settings
from numsort.core.exceptions import ConfigurationError
from numsort.core.logging import get_logger, log_context, log_stage
from numsort.core.models import OutputFormat, WriteResult
from numsort.core.parser import parse_numbers
from numsort.core.sorter import sort_descending
from numsort.output.writers import write_numbers

logger = get_logger("pipeline")


def sort_and_write(
    raw_numbers: str,
    format_token: str,
    settings: Settings | None = None,
) -> WriteResult:
    """
    Parse a delimited number list, sort it descending and write it out.

    Args:
        raw_numbers: Delimited integers, e.g. "5,-2,9,0"
        format_token: Case-insensitive output format (text, xml or json)
        settings: Optional settings; defaults to the cached instance

    Returns:
        Description of the written file

    Raises:
        ParseError: If a token of the number list is not an integer
        UnsupportedFormatError: If the format token is not supported
        ConfigurationError: If the output directory is unusable
        OutputWriteError: If the file cannot be written
    """
    settings = settings or get_settings()

    with log_stage(logger, "parse"):
        numbers = parse_numbers(raw_numbers, settings.delimiter)

    ordered = sort_descending(numbers)
    output_format = OutputFormat.from_token(format_token)
    output_dir = _check_output_dir(settings.output_dir)

    with log_context(output_format=output_format.value):
        with log_stage(logger, "write"):
            path = write_numbers(ordered, output_format, output_dir, settings)

    return WriteResult(path=path, format=output_format, numbers=ordered)


def _check_output_dir(output_dir: Path) -> Path:
    """Ensure the output directory exists and is a directory."""
    if not output_dir.is_dir():
        raise ConfigurationError(
            "output_dir",
            "Output directory does not exist or is not a directory",
            value=output_dir,
        )
    return output_dir
