# qdhex/logic.py

from __future__ import annotations

from typing import Iterable, Union

HEX_DIGITS = b"0123456789abcdef"
BYTES_PER_LINE = 16
LINE_WIDTH = 70
OFFSET_DIGITS = 4
OFFSET_MASK = 0xFFFFFFFF
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

SPACE = 0x20
NEWLINE = 0x0A

ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]


# ---------------- Helpers ----------------
def parse_int_maybe(text: str) -> int:
    """Parse an integer accepting 0x/0b/0o prefixes or decimal."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a number (e.g., 4096 or 0x1000).")
    return int(s, 0)

def hex_digit(nibble: int) -> int:
    """Return the ASCII code of the lowercase hex digit for the low 4 bits."""
    return HEX_DIGITS[nibble & 0x0F]

def bare_dump_size(length: int) -> int:
    return 3 * length - 1 if length > 0 else 0

def formatted_dump_size(length: int) -> int:
    lines = (length + BYTES_PER_LINE - 1) // BYTES_PER_LINE
    return lines * LINE_WIDTH

def as_bytes(data: ByteSource) -> bytes:
    """Normalize a byte source to ``bytes``.

    A bare int is rejected; ``bytes(n)`` would silently yield n zero bytes.
    """
    if isinstance(data, int):
        raise TypeError(f"expected a byte sequence, got int ({data!r})")
    return bytes(data)

def bytes_to_ascii(data: ByteSource) -> str:
    """Printable ASCII as-is, everything else as '.' (one char per byte)."""
    return "".join(
        chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else "." for b in as_bytes(data)
    )


# ---------------- Bare dump ----------------
def write_bare_dump(data: ByteSource, target: bytearray) -> None:
    """Append ``data`` as space-separated hex pairs to ``target``.

    Existing content of ``target`` is left alone. The trailing separator is
    only removed when something was written, so an empty ``data`` is a no-op.
    """
    data = as_bytes(data)
    if not data:
        return

    for b in data:
        target.append(HEX_DIGITS[b >> 4])
        target.append(HEX_DIGITS[b & 0x0F])
        target.append(SPACE)

    del target[-1]

def bare_dump(data: ByteSource) -> bytearray:
    """Return a new buffer holding the bare dump of ``data``.

    >>> bytes(bare_dump(b"\\x00\\x01\\x02\\x03"))
    b'00 01 02 03'
    """
    target = bytearray()
    write_bare_dump(data, target)
    return target

def bare_dump_string(data: ByteSource) -> str:
    # Only ever contains HEX_DIGITS and spaces.
    return bare_dump(data).decode("ascii")


# ---------------- Formatted dump ----------------
def _write_offset(offset: int, target: bytearray) -> None:
    # Low 16 bits only; larger offsets wrap in the prefix.
    for i in range(OFFSET_DIGITS):
        target.append(hex_digit(offset >> (4 * (OFFSET_DIGITS - 1 - i))))
    target.append(SPACE)

def write_formatted_dump(offset: int, data: ByteSource, target: bytearray) -> None:
    """Append a multi-line hexdump of ``data`` to ``target``.

    Each line holds up to 16 bytes::

        1000 62 61 61 64 66 6f 6f 64 ba ad f0 0d 41 53 44 46 baadfood....ASDF
        1010 61 73 64 66 3b 6c 6b 6a 2e                      asdf;lkj.

    - The prefix is the running offset as 4 hex digits (low 16 bits).
    - A short final line is padded with 3 spaces per missing byte so the
      sidebar always starts in the same column.
    - The offset advances by 16 per line, modulo 2**32.
    - Empty ``data`` produces no output at all.
    """
    data = as_bytes(data)
    line_offset = offset & OFFSET_MASK

    for i in range(0, len(data), BYTES_PER_LINE):
        chunk = data[i:i + BYTES_PER_LINE]

        _write_offset(line_offset, target)
        write_bare_dump(chunk, target)
        target.extend(b"   " * (BYTES_PER_LINE - len(chunk)))

        target.append(SPACE)
        target.extend(bytes_to_ascii(chunk).encode("ascii"))
        target.append(NEWLINE)

        line_offset = (line_offset + BYTES_PER_LINE) & OFFSET_MASK

def formatted_dump(offset: int, data: ByteSource) -> bytearray:
    target = bytearray()
    write_formatted_dump(offset, data, target)
    return target

def formatted_dump_string(offset: int, data: ByteSource) -> str:
    return formatted_dump(offset, data).decode("ascii")
