import pytest

from zappygui.text import (
    text_find_index,
    text_insert,
    text_is_equal,
    text_length,
    text_replace,
    text_split,
    text_subtext,
    text_to_integer,
    text_to_lower,
    text_to_pascal,
    text_to_upper,
)


def test_text_is_equal():
    assert text_is_equal("Zappy", "Zappy") is True
    assert text_is_equal("Zappy", "zappy") is False


def test_text_length_additive():
    assert text_length("ab") + text_length("cde") == text_length("abcde")


def test_text_length_stops_at_nul():
    assert text_length("ab\0cd") == text_length("ab")
    assert text_length("") == text_length("\0abc")


@pytest.mark.parametrize("split_at", [0, 1, 3, 5])
def test_text_subtext_pieces_rebuild(split_at):
    s = "hello"
    head = text_subtext(s, 0, split_at)
    tail = text_subtext(s, split_at, text_length(s))
    assert head + tail == s


def test_text_subtext_whole_and_past_end():
    assert text_subtext("grid", 0, text_length("grid")) == "grid"
    assert text_subtext("grid", 10, 2) == ""


def test_text_replace_round_trip():
    original = "a-b-c"
    replaced = text_replace(original, "-", "+")
    assert text_find_index(replaced, "-") < 0
    assert text_replace(replaced, "+", "-") == original


def test_text_replace_empty_pattern_gives_empty():
    assert text_replace("abc", "", "x") == ""


def test_text_insert_value():
    assert text_insert("world", "hello ", 0) == "hello world"


@pytest.mark.parametrize("pos", [0, 2, 4])
def test_text_insert_then_remove(pos):
    s = "abcd"
    inserted = text_insert(s, "XY", pos)
    assert text_find_index(inserted, "XY") == pos
    assert text_replace(inserted, "XY", "") == s


def test_text_split_join_round_trip():
    s = "a,b,,c"
    parts = text_split(s, ",")
    assert ",".join(parts) == s
    assert "" in parts


def test_text_split_empty_text():
    assert text_split("", ";") == [""]


def test_text_split_count_limit():
    parts = text_split("," * 200, ",")
    assert len(parts) == 128
    assert parts[-1] == ""


def test_text_split_bad_delimiter():
    with pytest.raises(ValueError):
        text_split("a,b", ",,")


def test_text_find_index_locates_substring():
    s = "hello world"
    idx = text_find_index(s, "wor")
    assert text_subtext(s, idx, text_length("wor")) == "wor"
    assert text_find_index(s, "zzz") < 0


def test_upper_lower_round_trip():
    s = "MiXeD Case 42"
    assert text_to_upper(text_to_lower(s)) == text_to_upper(s)
    assert text_to_lower(text_to_upper(s)) == text_to_lower(s)
    assert text_to_upper("ABC") == "ABC"


def test_non_ascii_unchanged():
    assert text_to_upper("é") == "é"
    assert text_to_lower("É") == "É"


def test_text_to_pascal_value():
    assert text_to_pascal("hello_world") == "HelloWorld"


def test_text_to_pascal_removes_single_underscores():
    result = text_to_pascal("zappy_gui_client")
    assert "_" not in result
    assert text_to_lower(result) == "zappyguiclient"
    assert text_to_pascal("") == ""


@pytest.mark.parametrize("n", [0, 7, 123, 4096])
def test_text_to_integer_round_trip(n):
    assert text_to_integer(str(n)) == n
    assert text_to_integer("-" + str(n)) == -n
    assert text_to_integer("+" + str(n)) == n


def test_text_to_integer_stops_at_non_digit():
    assert text_to_integer("12abc") == text_to_integer("12")
    assert text_to_integer("abc") == text_to_integer("")