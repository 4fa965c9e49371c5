from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "data,expected",
    [
        (bytes([0x00, 0x01, 0x02, 0x03]), b"00 01 02 03"),
        (bytes([0x12, 0x34, 0x56, 0x78, 0xAB, 0xCD, 0xEF, 0xA0, 0x0B]), b"12 34 56 78 ab cd ef a0 0b"),
        (b"Hello, World!", b"48 65 6c 6c 6f 2c 20 57 6f 72 6c 64 21"),
        (b"\xab", b"ab"),
        (b"", b""),
    ],
)
def test_write_bare_dump(logic, data, expected):
    target = bytearray()
    logic.write_bare_dump(data, target)
    assert target == expected


def test_write_bare_dump_appends_without_clearing(logic):
    target = bytearray(b"Hello, World!")
    logic.write_bare_dump(b"\xab\x30", target)
    assert target == b"Hello, World!ab 30"


@pytest.mark.parametrize("existing", [b"x", b"trailing ", b"00 01 "])
def test_write_bare_dump_empty_keeps_existing_tail(logic, existing):
    # Nothing written, so nothing may be trimmed either.
    target = bytearray(existing)
    logic.write_bare_dump(b"", target)
    assert target == existing


def test_bare_dump_accepts_other_byte_sources(logic):
    assert logic.bare_dump(bytearray(b"\x01\x02")) == b"01 02"
    assert logic.bare_dump(memoryview(b"\xfe\xff")) == b"fe ff"
    assert logic.bare_dump([0x00, 0x7F, 0x80]) == b"00 7f 80"


def test_bare_dump_returns_new_buffer(logic):
    a = logic.bare_dump(b"\x01")
    b = logic.bare_dump(b"\x01")
    assert isinstance(a, bytearray)
    assert a == b and a is not b


def test_bare_dump_string(logic):
    assert logic.bare_dump_string(bytes([0, 1, 2, 3, 4, 5])) == "00 01 02 03 04 05"
    assert logic.bare_dump_string(b"") == ""


@pytest.mark.parametrize("n", [0, 1, 2, 15, 16, 17, 255, 256])
def test_bare_dump_length_and_separators(logic, n):
    data = bytes(i & 0xFF for i in range(n))
    out = logic.bare_dump_string(data)
    assert len(out) == logic.bare_dump_size(n) == (3 * n - 1 if n else 0)
    if n:
        assert not out.startswith(" ") and not out.endswith(" ")
        assert out.count(" ") == n - 1
        assert "  " not in out


def test_bare_dump_decodes_back(logic):
    data = bytes(range(256))
    assert bytes.fromhex(logic.bare_dump_string(data)) == data


def test_bare_dump_is_lowercase(logic):
    out = logic.bare_dump_string(bytes(range(0xA0, 0x100)))
    assert out == out.lower()


@pytest.mark.parametrize("nibble,expected", [(0, "0"), (9, "9"), (10, "a"), (15, "f"), (0x1F, "f")])
def test_hex_digit(logic, nibble, expected):
    assert chr(logic.hex_digit(nibble)) == expected


@pytest.mark.parametrize("func", ["bare_dump", "bare_dump_string", "bytes_to_ascii", "as_bytes"])
def test_int_is_not_a_byte_count(logic, func):
    with pytest.raises(TypeError):
        getattr(logic, func)(3)


def test_write_bare_dump_int_leaves_target_alone(logic):
    target = bytearray(b"ab")
    with pytest.raises(TypeError):
        logic.write_bare_dump(3, target)
    assert target == b"ab"
