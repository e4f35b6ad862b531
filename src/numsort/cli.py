"""Command-line interface for numsort."""

import sys
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from numsort import __version__
from numsort.core.config import Settings, get_settings
from numsort.core.constants import PROG_NAME, SUCCESS_MESSAGE, USAGE_MESSAGE
from numsort.core.exceptions import NumsortError
from numsort.core.logging import configure_logging, get_logger
from numsort.core.pipeline import sort_and_write

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
logger = get_logger("cli")


def setup_logging(settings: Settings) -> None:
    """Send numsort log records to stderr, as rich output or JSON lines."""
    configure_logging(settings.log_level, json_output=settings.json_logs)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    sys.exit(1)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("numbers", required=False)
@click.argument("file_format", required=False)
@click.argument("extra", nargs=-1)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the output file to (default: current directory)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Emit log records as JSON",
)
def main(
    numbers: str | None,
    file_format: str | None,
    extra: tuple[str, ...],
    output_dir: Path | None,
    verbose: bool,
    json_logs: bool,
):
    """
    Sort comma-separated integers in descending order and write them to a file.

    NUMBERS: Comma-separated integers, e.g. "5,-2,9,0".
    FILE_FORMAT: text, xml or json (any case). Further arguments are ignored.

    The file is written as SortedNumbers.<format>.

    Example:
        numsort "10,-5,0" json
    """
    if numbers is None or file_format is None:
        console.print(USAGE_MESSAGE, soft_wrap=True)
        return

    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")

    overrides: dict[str, object] = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if verbose:
        overrides["log_level"] = "DEBUG"
    if json_logs:
        overrides["json_logs"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings)
    if extra:
        logger.debug("Ignoring extra arguments", extra={"ignored": list(extra)})

    try:
        result = sort_and_write(numbers, file_format, settings)
    except NumsortError as e:
        _fail(str(e))

    console.print(escape(SUCCESS_MESSAGE.format(file_name=result.path)), soft_wrap=True)


if __name__ == "__main__":
    main()
