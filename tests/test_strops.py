import pytest

from travcore.strops import (
    compare,
    grow_zero,
    join,
    map_chars,
    str_range,
    to_lower,
    to_upper,
    trim,
)


def test_trim_removes_set_from_both_ends():
    assert trim("xxciaoyyy", "xy") == "ciao"


def test_trim_bytes():
    assert trim(b"xxciaoyyy", b"xy") == b"ciao"


def test_trim_everything_gives_empty():
    assert trim("xyxy", "xy") == ""


def test_trim_keeps_inner_characters():
    assert trim("xaxbx", "x") == "axb"


def test_trim_mixed_types_rejected():
    with pytest.raises(TypeError):
        trim("abc", b"a")


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (1, 1, "i"),
        (1, -1, "iao"),
        (-2, -1, "ao"),
        (2, 1, ""),
        (1, 100, "iao"),
        (100, 100, ""),
    ],
)
def test_str_range_cases(start, end, expected):
    assert str_range("ciao", start, end) == expected


def test_str_range_doc_example():
    assert str_range("Hello World", 1, -1) == "ello World"


def test_str_range_empty_input():
    assert str_range("", 0, 5) == ""


def test_str_range_full_is_identity():
    assert str_range(b"abcdef", 0, -1) == b"abcdef"


def test_compare_greater():
    assert compare("foo", "foa") > 0


def test_compare_equal():
    assert compare("bar", "bar") == 0


def test_compare_less():
    assert compare("aar", "bar") < 0


def test_compare_prefix_shorter_is_less():
    assert compare(b"ab", b"abc") < 0
    assert compare(b"abc", b"ab") > 0


def test_compare_antisymmetric():
    pairs = [("foo", "foa"), ("a", "abc"), ("zz", "z")]
    for a, b in pairs:
        assert (compare(a, b) > 0) == (compare(b, a) < 0)


def test_map_chars_doc_example():
    assert map_chars("hello", "ho", "01") == "0ell1"


def test_map_chars_bytes():
    assert map_chars(b"hello", b"ho", b"01") == b"0ell1"


def test_map_chars_first_mapping_wins():
    assert map_chars("aaa", "aa", "xy") == "xxx"


def test_map_chars_length_mismatch():
    with pytest.raises(ValueError):
        map_chars("abc", "ab", "x")


def test_join_parts():
    assert join(["foo", "bar", "baz"], ",") == "foo,bar,baz"


def test_join_single_and_empty():
    assert join(["only"], "-") == "only"
    assert join([], "-") == ""


def test_grow_zero_pads_with_nul():
    grown = grow_zero(b"ab", 5)
    assert len(grown) == 5
    assert grown.startswith(b"ab")
    assert set(grown[2:]) == {0}


def test_grow_zero_shorter_length_unchanged():
    assert grow_zero("abcdef", 3) == "abcdef"


def test_case_conversion_round_trip():
    text = "Hello World 123"
    assert to_lower(text) == text.lower()
    assert to_upper(text) == text.upper()
    assert to_lower(to_upper(text)) == text.lower()


def test_case_conversion_ascii_only():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_case_conversion_bytes():
    assert to_upper(b"abc") == b"ABC"
    assert to_lower(b"ABC") == b"abc"