import pytest

from cubed.textutil import atoi, is_digits, split, strncmp, substr


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -17", -17),
        ("\t\n+8", 8),
        ("123abc", 123),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("--5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


def test_atoi_round_trip():
    for value in (-1000, -1, 0, 7, 65535):
        assert atoi(str(value)) == value


@pytest.mark.parametrize("text", ["0", "0123456789", ""])
def test_is_digits_true(text):
    assert is_digits(text) is True


@pytest.mark.parametrize("text", ["12a", " 1", "-1", "1.0", "\u0663"])
def test_is_digits_false(text):
    assert is_digits(text) is False


def test_split_drops_empty_pieces():
    assert split(",,a,,bc,", ",") == ["a", "bc"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("one", ",") == ["one"]


def test_split_rejoin_invariant():
    text = "1 0 0   1 N"
    parts = split(text, " ")
    assert " ".join(parts) == " ".join(text.split())


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 0, 0) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_antisymmetric():
    pairs = [("NO", "SO"), ("F", "C"), ("WE", "EA"), ("map", "mat")]
    for a, b in pairs:
        assert strncmp(a, b, 3) == -strncmp(b, a, 3)


def test_strncmp_difference_of_codes():
    assert strncmp("a", "b", 1) == ord("a") - ord("b")