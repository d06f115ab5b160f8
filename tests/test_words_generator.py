"""tests for module words_generator"""

from itertools import islice
import pytest
from allwords.alphabet import Alphabet
from allwords.words_generator import WordsGenerator


def test_all_words_up_to_length():
    """test odometer order over a 3 chars alphabet"""
    a = Alphabet.from_chars_in_str("abc")
    words = list(a.words_up_to(3))
    expected = (
        ["a", "b", "c"]
        + ["aa", "ab", "ac", "ba", "bb", "bc", "ca", "cb", "cc"]
        + ["aaa", "aab", "aac", "aba", "abb", "abc", "aca", "acb", "acc"]
        + ["baa", "bab", "bac", "bba", "bbb", "bbc", "bca", "bcb", "bcc"]
        + ["caa", "cab", "cac", "cba", "cbb", "cbc", "cca", "ccb", "ccc"]
    )
    assert words == expected, "words should be generated in odometer order"
    assert len(words) == 39


def test_binary():
    """test generation over a binary alphabet"""
    a = Alphabet.from_chars_in_str("01")
    words = list(a.words_up_to(3))
    assert words == [
        "0", "1",
        "00", "01", "10", "11",
        "000", "001", "010", "011", "100", "101", "110", "111",
    ]


def test_unicode_max_len():
    """test that the maximum length counts symbols, not bytes"""
    a = Alphabet.from_chars_in_str("😀😃")
    words = list(a.words_up_to(2))
    assert words == [
        "😀", "😃",
        "😀😀", "😀😃", "😃😀", "😃😃",
    ], "each pictographic codepoint counts as one symbol"
    assert list(a.words_of_length_at_least(3, 3))[-1] == "😃😃😃"
    assert list(a.words_from("😀😃😃", 3)) == ["😀😃😃", "😃😀😀", "😃😀😃", "😃😃😀", "😃😃😃"]


def test_alphabet_order():
    """test that the alphabet order, not the codepoint order, is followed"""
    a = Alphabet("ba")
    assert list(a.words_up_to(2)) == ["b", "a", "bb", "ba", "ab", "aa"]


def test_unbounded_unique():
    """test that the first 1000 unbounded words are all different"""
    a = Alphabet.from_chars_in_str("ab")
    words = list(islice(a.words_unbounded(), 1000))
    assert len(words) == 1000
    assert len(set(words)) == 1000, "no word should be generated twice"


def test_unbounded_lengths_grow():
    """test that word lengths never decrease"""
    words = list(islice(Alphabet("xyz").words_unbounded(), 500))
    lengths = [len(w) for w in words]
    assert lengths == sorted(lengths), "all shorter words come before longer ones"


def test_words_from():
    """test restarting the generation from a given word"""
    a = Alphabet.from_chars_in_str("01")
    assert list(a.words_from("011", 3)) == ["011", "100", "101", "110", "111"]


def test_restart_equivalence():
    """test that restarting from a word gives the same tail"""
    a = Alphabet("abc")
    full = list(a.words_up_to(3))
    tail = full[full.index("bca"):]
    assert list(a.words_from("bca", 3)) == tail


def test_restart_from_peek():
    """test resuming a generator from the word it would emit next"""
    a = Alphabet("abc")
    gen = a.words_up_to(4)
    head = list(islice(gen, 20))
    resumed = a.words_from(gen.peek(), gen.max_len)
    assert head + list(resumed) == list(a.words_up_to(4))


def test_words_of_length_at_least():
    """test starting from the first word of a given length"""
    a = Alphabet.from_chars_in_str("01")
    assert list(a.words_of_length_at_least(3, 3)) == [
        "000", "001", "010", "011", "100", "101", "110", "111",
    ], "only words of length 3 should be generated"
    assert list(a.words_of_length_at_least(2, 3))[:4] == ["00", "01", "10", "11"]


def test_unknown_symbols():
    """test that symbols out of the alphabet behave like the last symbol"""
    a = Alphabet("01")
    assert list(a.words_from("0x", 2)) == ["0x", "10", "11"]
    assert list(a.words_from("x", 2)) == ["x", "00", "01", "10", "11"]
    assert list(a.words_from("x1", 3))[:2] == ["x1", "000"]


def test_carry_stops():
    """test that symbols left of the carry are untouched"""
    a = Alphabet("abc")
    assert list(islice(a.words_from("acc"), 2)) == ["acc", "baa"]
    assert list(islice(a.words_from("ccc"), 2)) == ["ccc", "aaaa"]


def test_exhaustion():
    """test that an exhausted generator keeps returning nothing"""
    gen = Alphabet("01").words_up_to(1)
    assert gen.next_word() == "0"
    assert gen.next_word() == "1"
    assert gen.next_word() is None
    assert gen.next_word() is None, "exhaustion is sticky"
    assert gen.peek() is None
    with pytest.raises(StopIteration):
        next(gen)
    assert list(gen) == []


def test_start_beyond_max_len():
    """test a starting word already longer than the maximum length"""
    a = Alphabet("01")
    assert list(a.words_from("000", 2)) == []
    assert list(a.words_up_to(0)) == []


def test_empty_start_word():
    """test that the empty word is followed by the first symbol"""
    a = Alphabet("01")
    assert list(a.words_from("", 1)) == ["", "0", "1"]
    assert list(a.words_of_length_at_least(0, 1)) == ["", "0", "1"]


def test_peek_does_not_advance():
    """test that peek returns the next word without consuming it"""
    gen = Alphabet("ab").words_unbounded()
    assert gen.peek() == "a"
    assert gen.peek() == "a"
    assert next(gen) == "a"
    assert gen.peek() == "b"


def test_iter_returns_self():
    """test the iterator protocol"""
    gen = Alphabet("ab").words_up_to(2)
    assert iter(gen) is gen


def test_independent_generators():
    """test that generators over the same alphabet do not interfere"""
    a = Alphabet("ab")
    g1 = a.words_unbounded()
    g2 = a.words_unbounded()
    assert next(g1) == "a"
    assert next(g1) == "b"
    assert next(g2) == "a", "each generator has its own cursor"


def test_negative_max_len():
    """test that a negative maximum length is rejected"""
    with pytest.raises(ValueError):
        WordsGenerator(Alphabet("ab"), "a", -1)
    with pytest.raises(ValueError):
        Alphabet("ab").words_up_to(-2)
