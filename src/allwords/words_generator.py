"""this module defines an object that
sequentially generates the words over an alphabet"""

import logging
from typing import TYPE_CHECKING, List, Optional

from allwords.constants import GENERATOR_LOGGER

if TYPE_CHECKING:
    from allwords.alphabet import Alphabet


class WordsGenerator:
    """A class that generates possibly infinitely many words in sequential order

    Words are enumerated like an odometer: all the words of length 1, then all
    the words of length 2 and so on, each length in the order defined by the
    alphabet. The generator can only move forward; to restart from a given word
    build a new generator with Alphabet.words_from.
    """

    _alphabet: "Alphabet"
    _max_len: Optional[int]
    _next_word: str
    _exhausted: bool

    def __init__(self, alphabet: "Alphabet", start_word: str, max_len: Optional[int] = None):
        """
        Args:
            alphabet (Alphabet): the alphabet the words are built from
            start_word (str): the first word returned by the generator
            max_len (Optional[int]) [None]: the maximum length of the generated words.
                If None the generator is endless

        Raises:
            ValueError: if max_len is negative
        """
        if max_len is not None and max_len < 0:
            raise ValueError(f"max_len must be non negative, got {max_len}")
        self.logger = logging.getLogger(GENERATOR_LOGGER)
        self._alphabet = alphabet
        self._max_len = max_len
        self._next_word = start_word
        self._exhausted = False
        self.logger.debug(
            "Generating words from %r with max length %s", start_word, str(max_len)
        )

    @property
    def alphabet(self) -> "Alphabet":
        """the alphabet the words are built from"""
        return self._alphabet

    @property
    def max_len(self) -> Optional[int]:
        """the maximum length of the generated words, None if unbounded"""
        return self._max_len

    def _successor(self, word: str) -> str:
        """computes the word following the given one

        increments the rightmost symbol and propagates the carry to the left,
        a carry out of the leftmost symbol adds a new first symbol
        """
        first_char = self._alphabet.first_char
        next_word: List[str] = []
        carry = True
        for c in reversed(word):
            if carry:
                next_char = self._alphabet.next_char(c)
                if next_char is None:
                    next_word.append(first_char)
                else:
                    next_word.append(next_char)
                    carry = False
            else:
                next_word.append(c)
        if carry:
            next_word.append(first_char)
        return "".join(reversed(next_word))

    def _is_exhausted(self) -> bool:
        if self._exhausted:
            return True
        if self._max_len is not None and len(self._next_word) > self._max_len:
            self._exhausted = True
            self.logger.debug("Words generator exhausted after max length %d", self._max_len)
        return self._exhausted

    def peek(self) -> Optional[str]:
        """returns the word the next call will emit without advancing,
        None if the generator is exhausted"""
        if self._is_exhausted():
            return None
        return self._next_word

    def next_word(self) -> Optional[str]:
        """returns the next word in sequential order,
        None if the generator is exhausted"""
        if self._is_exhausted():
            return None
        current_word = self._next_word
        self._next_word = self._successor(current_word)
        return current_word

    def __iter__(self) -> "WordsGenerator":
        return self

    def __next__(self) -> str:
        word = self.next_word()
        if word is None:
            raise StopIteration
        return word
