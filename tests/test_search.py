import pytest

from raycube.search import (
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_whole_string():
    assert strlen("hello") == len("hello")


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == len("ab")
    assert strlen(b"xyz\0") == len(b"xyz")


def test_strlen_empty():
    assert strlen("") == 0


def test_strchr_finds_first():
    text = "salut a france"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_missing():
    assert strchr("salut a france", "p") is None


def test_strchr_nul_gives_terminator():
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    text = "alors la zone"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("alors", "q") is None
    assert strrchr("alors", "\0") == len("alors")


def test_strnstr_not_found():
    assert strnstr("bien ou quoi ", "fares", 12) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_window():
    big = "hello world"
    index = strnstr(big, "world", len(big))
    assert big[index:index + len("world")] == "world"


def test_strnstr_match_must_fit_window():
    big = "hello world"
    assert strnstr(big, "world", len(big) - 1) is None


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_source_example_first_char():
    assert strncmp("Hello, World!", "Hello, There!", 1) == 0


def test_strncmp_sign():
    assert strncmp("Hello, World!", "Hello, There!", 13) > 0
    assert strncmp("Hello, There!", "Hello, World!", 13) < 0


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_antisymmetric():
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) < 0


def test_strlcat_source_example():
    result, total = strlcat("hello", "world", 10)
    assert result == "helloworl"
    assert total == len("hello") + len("world")


def test_strlcat_fits():
    result, total = strlcat("ab", "cd", 20)
    assert result == "ab" + "cd"
    assert total == len(result)


def test_strlcat_size_not_above_dst():
    result, total = strlcat("hello", "world", 3)
    assert result == "hello"
    assert total == 3 + len("world")


def test_strlcpy_copies():
    result, total = strlcpy("Hello, ", "world!", 20)
    assert result == "world!"
    assert total == len("world!")


def test_strlcpy_truncates():
    result, total = strlcpy("", "abcdef", 4)
    assert result == "abcdef"[:3]
    assert total == len("abcdef")


def test_strlcpy_zero_size_keeps_dst():
    result, total = strlcpy("keep", "other", 0)
    assert result == "keep"
    assert total == len("other")


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcpy("", "x", -1)
    with pytest.raises(ValueError):
        strlcat("", "x", -1)