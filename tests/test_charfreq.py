import pytest

from huffcode.charfreq import CharFreq, make_sorted_list
from huffcode.errors import EmptyInputError, CharacterRangeError


def test_two_equal_characters():
    assert make_sorted_list("ab") == [CharFreq("a", 0.5), CharFreq("b", 0.5)]


def test_sorted_by_probability_then_character():
    out = make_sorted_list("ccab")
    assert [e.character for e in out] == ["a", "b", "c"]
    assert [e.probability for e in out] == [0.25, 0.25, 0.5]


def test_ties_broken_by_character_code():
    out = make_sorted_list("cab")
    assert [e.character for e in out] == ["a", "b", "c"]


def test_internal_entry_sorts_after_leaf_of_equal_probability():
    entries = [CharFreq(None, 0.5), CharFreq("z", 0.5), CharFreq("a", 0.25)]
    assert [e.character for e in sorted(entries)] == ["a", "z", None]


def test_single_character_gets_placeholder():
    out = make_sorted_list("aaaa")
    assert out == [CharFreq("b", 0.0), CharFreq("a", 1.0)]


def test_placeholder_wraps_to_nul_after_del():
    out = make_sorted_list("\x7f\x7f")
    assert out == [CharFreq("\x00", 0.0), CharFreq("\x7f", 1.0)]


def test_accepts_any_character_iterator():
    out = make_sorted_list(iter(["x", "y", "x"]))
    assert [e.character for e in out] == ["y", "x"]


def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        make_sorted_list("")


@pytest.mark.parametrize("text", ["a\x00", "caf\xe9", "☃"])
def test_out_of_range_characters_raise(text):
    with pytest.raises(CharacterRangeError):
        make_sorted_list(text)
