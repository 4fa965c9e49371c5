# qdhex/__init__.py

"""qdhex package.

Re-exports the core logic for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
)

from .logic import (
    BYTES_PER_LINE,
    HEX_DIGITS,
    LINE_WIDTH,
    OFFSET_DIGITS,
    OFFSET_MASK,
    PRINTABLE_MIN,
    PRINTABLE_MAX,
    bare_dump,
    bare_dump_size,
    as_bytes,
    bare_dump_string,
    bytes_to_ascii,
    formatted_dump,
    formatted_dump_size,
    formatted_dump_string,
    hex_digit,
    parse_int_maybe,
    write_bare_dump,
    write_formatted_dump,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR",
    # Logic
    "BYTES_PER_LINE", "HEX_DIGITS", "LINE_WIDTH", "OFFSET_DIGITS", "OFFSET_MASK",
    "PRINTABLE_MIN", "PRINTABLE_MAX",
    "as_bytes", "bare_dump", "bare_dump_size", "bare_dump_string", "bytes_to_ascii",
    "formatted_dump", "formatted_dump_size", "formatted_dump_string",
    "hex_digit", "parse_int_maybe",
    "write_bare_dump", "write_formatted_dump",
]
