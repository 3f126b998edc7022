import pytest
from hypothesis import given
from hypothesis import strategies as st

from utfkit.utf8string import Utf8String


def test_append_literals():
    string = Utf8String()
    string.append(b"hello")
    string.append(b" world")
    assert bytes(string) == b"hello world"


def test_prepend_literals():
    string = Utf8String()
    string.prepend(b" world")
    string.prepend(b"hello")
    assert bytes(string) == b"hello world"


def test_replace_literal():
    string = Utf8String()
    string.append(b"hello world")
    string.replace(5, 1, b" there ")
    assert bytes(string) == b"hello there world"


def test_append_accepts_strings_characters_and_text():
    string = Utf8String("a")
    string.append(Utf8String(b"b"))
    string.append(ord("c"))
    string.append("\u00e9")
    assert bytes(string) == b"abc\xc3\xa9"
    assert str(string) == "abc\u00e9"


def test_append_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        Utf8String().append(256)


def test_prepend_character():
    string = Utf8String(b"bc")
    string.prepend(ord("a"))
    assert bytes(string) == b"abc"


def test_insert_in_middle_and_at_end():
    string = Utf8String(b"held")
    string.insert(2, b"llo wor")
    assert bytes(string) == b"hello world"
    string.insert(len(string), ord("!"))
    assert bytes(string) == b"hello world!"


def test_insert_past_end_raises():
    string = Utf8String(b"abc")
    with pytest.raises(IndexError):
        string.insert(4, b"x")
    assert bytes(string) == b"abc"


def test_replace_clips_length_at_end():
    string = Utf8String(b"hello world")
    string.replace(6, 100, b"there")
    assert bytes(string) == b"hello there"


def test_replace_with_character():
    string = Utf8String(b"hello world")
    string.replace(5, 1, ord("_"))
    assert bytes(string) == b"hello_world"


def test_replace_past_end_raises():
    with pytest.raises(IndexError):
        Utf8String(b"abc").replace(5, 1, b"x")


def test_erase():
    string = Utf8String(b"hello world")
    string.erase(5, 6)
    assert bytes(string) == b"hello"
    string.erase(1, 100)
    assert bytes(string) == b"h"


def test_erase_past_end_raises():
    with pytest.raises(IndexError):
        Utf8String(b"abc").erase(4, 1)


def test_concat_leaves_operands_unchanged():
    left = Utf8String(b"hello")
    result = left.concat(b" world")
    assert bytes(result) == b"hello world"
    assert bytes(left) == b"hello"
    assert bytes(left.concat(ord("!"))) == b"hello!"


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (b"abc", b"abc", 0),
        (b"abc", b"abd", -1),
        (b"abd", b"abc", 1),
        (b"ab", b"abc", -1),
        (b"abc", b"ab", 1),
        (b"", b"", 0),
        (b"\xff", b"a", 1),
    ],
)
def test_compare(left, right, expected):
    assert Utf8String(left).compare(right) == expected
    assert Utf8String(left).compare(Utf8String(right)) == expected


def test_compare_stops_at_shared_nul():
    assert Utf8String(b"a\x00x").compare(b"a\x00y") == 0


def test_substring_bounds():
    string = Utf8String(b"hello")
    assert string.substring(1) == b"ello"
    assert string.substring(1, None) == b"ello"
    assert string.substring(2, 100) == b"llo"
    assert string.substring(4, 2) == b""


def test_substring_copy_is_independent():
    string = Utf8String(b"hello world")
    part = string.substring_copy(0, 5)
    part.append(b"!")
    assert bytes(part) == b"hello!"
    assert bytes(string) == b"hello world"


def test_index_of():
    string = Utf8String(b"hello world")
    assert string.index_of(ord("o")) == 4
    assert string.index_of(b"o", 5) == 7
    assert string.index_of("z") == -1
    assert string.index_of(ord("h"), 100) == -1


def test_last_index_of():
    string = Utf8String(b"hello world")
    assert string.last_index_of(ord("o")) == 7
    assert string.last_index_of(ord("o"), 6) == 4
    assert string.last_index_of(ord("h"), 0) == 0
    assert string.last_index_of(ord("z")) == -1
    assert string.last_index_of(ord("o"), 11) == -1


def test_last_index_of_empty_string():
    assert Utf8String().last_index_of(ord("a")) == -1


def test_index_of_rejects_multi_byte_needle():
    with pytest.raises(ValueError):
        Utf8String(b"abc").index_of(b"ab")


def test_clear_and_copy():
    string = Utf8String(b"abc")
    duplicate = string.copy()
    string.clear()
    assert len(string) == 0
    assert not string
    assert bytes(duplicate) == b"abc"


def test_equality_with_bytes_and_strings():
    assert Utf8String("h\u00e9") == b"h\xc3\xa9"
    assert Utf8String(b"abc") == Utf8String("abc")
    assert not Utf8String(b"abc") == b"abd"


@given(st.binary(), st.binary())
def test_append_then_erase_round_trip(base, extra):
    string = Utf8String(base)
    string.append(extra)
    assert bytes(string) == base + extra
    string.erase(len(base), len(extra))
    assert bytes(string) == base


@given(st.binary(), st.binary(), st.data())
def test_insert_matches_slicing(base, extra, data):
    pos = data.draw(st.integers(min_value=0, max_value=len(base)))
    string = Utf8String(base)
    string.insert(pos, extra)
    assert bytes(string) == base[:pos] + extra + base[pos:]
    assert len(string) == len(base) + len(extra)


@given(st.binary(max_size=20), st.binary(max_size=20))
def test_compare_is_antisymmetric(left, right):
    assert Utf8String(left).compare(right) == -Utf8String(right).compare(left)