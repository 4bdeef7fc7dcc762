import f4cmp
import pytest

def test_convert_long_to_bytes():
    assert f4cmp.convert_long_to_bytes(1) == b"\x00" * 7 + b"\x01"
    assert f4cmp.convert_long_to_bytes(-1) == b"\xff" * 8
    assert f4cmp.convert_long_to_bytes(f4cmp.LONG_MIN) == b"\x80" + b"\x00" * 7

    with pytest.raises(OverflowError):
        f4cmp.convert_long_to_bytes(f4cmp.LONG_MAX + 1)

@pytest.mark.parametrize("value", [0, 1, -1, 42, f4cmp.LONG_MIN, f4cmp.LONG_MAX])
def test_convert_bytes_to_long(value):
    assert f4cmp.convert_bytes_to_long(f4cmp.convert_long_to_bytes(value)) == value

def test_compare_bytes():
    assert f4cmp.compare_bytes(b"abc", b"abc") == 0
    assert f4cmp.compare_bytes(b"abc", b"abd") == -1
    assert f4cmp.compare_bytes(b"ab", b"abc") == -1
    assert f4cmp.compare_bytes(b"\xff", b"\x01") == 1
    assert f4cmp.compare_bytes(b"", b"") == 0

def test_slice_bytes():
    assert f4cmp.slice_bytes(b"abcdef") == b"abcdef"
    assert f4cmp.slice_bytes(b"abcdef", 2) == b"cdef"
    assert f4cmp.slice_bytes(bytearray(b"abcdef"), 1, 3) == b"bcd"
    assert f4cmp.slice_bytes(b"abc", 3, 0) == b""

    for offset, length in [(-1, 1), (0, 4), (4, None), (1, -1)]:
        with pytest.raises(IndexError):
            f4cmp.slice_bytes(b"abc", offset, length)

def test_is_text():
    assert f4cmp.is_text(b"12345678")
    assert f4cmp.is_text(b"")
    assert f4cmp.is_text("éééé".encode())
    assert f4cmp.is_text(bytearray("ab日本".encode()))
    assert not f4cmp.is_text(b"1234567\x00")
    assert not f4cmp.is_text(b"\x7f")
    assert not f4cmp.is_text(b"\xff\xfe")
    assert not f4cmp.is_text(f4cmp.convert_long_to_bytes(42))

def test_print_message(capsys):
    f4cmp.print_message("hidden")
    assert capsys.readouterr().out == ""

    f4cmp.print_message("shown", True)
    assert capsys.readouterr().out.startswith("shown - ")
