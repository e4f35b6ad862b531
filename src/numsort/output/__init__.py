"""Output formatting and file writing."""

from numsort.output.writers import (
    RENDERERS,
    format_json,
    format_text,
    format_xml,
    get_renderer,
    render_numbers,
    write_numbers,
)

__all__ = [
    "RENDERERS",
    "format_json",
    "format_text",
    "format_xml",
    "get_renderer",
    "render_numbers",
    "write_numbers",
]
