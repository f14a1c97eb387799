import pytest

from rtpixels.wordtab import find, find_unquoted, split_words


def test_find_matches_str_index():
    text = 'static char *xpm[] = { "4 4 2 1" };'
    assert find(text, '"', len(text)) == text.index('"')
    assert find(text, "xpm", len(text)) == text.index("xpm")


def test_find_not_found():
    assert find("abcdef", "xyz", 6) == -1


def test_find_needle_longer_than_limit():
    text = "abcdef"
    assert find(text, "cde", 2) == -1
    assert find(text, "cde", 3) == text.index("cde")


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd", 5) == -1


def test_find_empty_needle_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_match():
    text = 'a "/* x */" /* real */'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")
    assert find(text, "/*", len(text)) == text.index("/*")


def test_find_unquoted_plain_match():
    text = "abc // comment"
    assert find_unquoted(text, "//", len(text)) == text.index("//")


def test_find_unquoted_all_quoted():
    text = '"// inside"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_limit():
    assert find_unquoted("x /* y", "/*", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  hello\tworld  foo ") == ["hello", "world", "foo"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_rejoin_round_trip():
    words = ["16", "16", "2", "1"]
    assert split_words("\t".join(words)) == words