"""Constants shared by the parser, the writers and the CLI."""

# =============================================================================
# INPUT
# =============================================================================

# Separator between tokens of the number list
DEFAULT_DELIMITER = ","

# Optional single sign followed by ASCII digits; nothing else is accepted
INTEGER_PATTERN = r"[+-]?[0-9]+"

# Longest digit run accepted; matches the interpreter's default str-to-int limit
MAX_INTEGER_DIGITS = 4300


# =============================================================================
# OUTPUT
# =============================================================================

# Output files are named <basename>.<format extension>
OUTPUT_BASENAME = "SortedNumbers"

# XML element names
XML_ROOT_TAG = "Numbers"
XML_ITEM_TAG = "Number"

# Encoding used for every output format
OUTPUT_ENCODING = "utf-8"


# =============================================================================
# CLI
# =============================================================================

PROG_NAME = "numsort"

USAGE_MESSAGE = f"Usage: {PROG_NAME} <numbers> <fileformat>"

SUCCESS_MESSAGE = "Sorted numbers have been written to {file_name}."
