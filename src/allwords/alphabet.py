"""this module defines the Alphabet class, an ordered set of symbols
from which words can be generated"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from allwords.constants import ALPHABET_LOGGER, MIN_ALPHABET_SIZE
from allwords.custom_exceptions import AlphabetTooSmallException
from allwords.words_generator import WordsGenerator


def _check_symbol(symbol: object) -> str:
    """checks that a symbol is a single character

    Args:
        symbol (object): an item of the source sequence

    Returns:
        str: the symbol itself

    Raises:
        TypeError: if the item is not a string of length 1
    """
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise TypeError(f"Alphabet symbols must be single characters, got {symbol!r}")
    return symbol


class Alphabet:
    """An immutable alphabet of symbols with a defined ordering

    The ordering is given by the order in which the unique symbols are first
    encountered in the source. Every symbol points to the next one, the last
    symbol points to None.
    """

    _next_char_map: Mapping[str, Optional[str]]
    _first_char: str

    def __init__(self, symbols: Iterable[str]):
        """creates a new alphabet from the unique symbols found in order in the source

        Args:
            symbols (Iterable[str]): the source sequence of symbols. A string
                is read one codepoint at a time

        Raises:
            AlphabetTooSmallException: if the source contains less than 2 unique symbols
            TypeError: if the source yields something that is not a single character
        """
        logger = logging.getLogger(ALPHABET_LOGGER)
        next_char_map: Dict[str, Optional[str]] = {}
        first_char: Optional[str] = None
        previous_char: Optional[str] = None

        for c in symbols:
            c = _check_symbol(c)
            if first_char is None:
                first_char = c
                previous_char = c
            elif previous_char != c and c not in next_char_map:
                next_char_map[previous_char] = c
                previous_char = c

        # the last char is the maximal one
        if previous_char is not None and previous_char not in next_char_map:
            next_char_map[previous_char] = None

        if len(next_char_map) < MIN_ALPHABET_SIZE:
            raise AlphabetTooSmallException()

        self._next_char_map = MappingProxyType(next_char_map)
        self._first_char = first_char
        logger.info("Created alphabet of %d symbols", len(next_char_map))

    @property
    def next_char_map(self) -> Mapping[str, Optional[str]]:
        """the read-only map from every symbol to the next one"""
        return self._next_char_map

    @property
    def first_char(self) -> str:
        """the first symbol of the alphabet"""
        return self._first_char

    @classmethod
    def from_chars_in_str(cls, alphabet_str: str) -> "Alphabet":
        """creates a new alphabet from the unique characters of a string

        Args:
            alphabet_str (str): the string containing the characters of the alphabet

        Returns:
            Alphabet: the new alphabet
        """
        return cls(alphabet_str)

    def next_char(self, symbol: str) -> Optional[str]:
        """returns the symbol following the given one

        Symbols which are not part of the alphabet are treated as the last symbol.

        Args:
            symbol (str): a symbol

        Returns:
            Optional[str]: the next symbol, or None if there is no next symbol
        """
        return self.next_char_map.get(symbol)

    def symbols(self) -> List[str]:
        """returns the symbols of the alphabet in order"""
        ordered = []
        current = self.first_char
        while current is not None:
            ordered.append(current)
            current = self.next_char_map[current]
        return ordered

    def words_up_to(self, max_len: Optional[int] = None) -> WordsGenerator:
        """creates a generator of all the words over the alphabet

        Args:
            max_len (Optional[int]) [None]: the maximum length of the generated words.
                If None the generator is endless

        Returns:
            WordsGenerator: the generator, starting from the first symbol
        """
        return WordsGenerator(self, self.first_char, max_len)

    def words_unbounded(self) -> WordsGenerator:
        """creates an endless generator of all the words over the alphabet"""
        return self.words_up_to(None)

    def words_from(self, start_word: str, max_len: Optional[int] = None) -> WordsGenerator:
        """creates a generator of all the words over the alphabet starting from a given word

        The starting word is not checked against the alphabet: symbols that do
        not belong to it are treated as the last symbol, so they wrap to the
        first symbol on the next step.

        Args:
            start_word (str): the first word emitted by the generator
            max_len (Optional[int]) [None]: the maximum length of the generated words.
                If None the generator is endless

        Returns:
            WordsGenerator: the generator
        """
        return WordsGenerator(self, start_word, max_len)

    def words_of_length_at_least(
        self, start_len: int, max_len: Optional[int] = None
    ) -> WordsGenerator:
        """creates a generator of all the words over the alphabet
        starting from the first word of a given length

        Args:
            start_len (int): the length of the first emitted word
            max_len (Optional[int]) [None]: the maximum length of the generated words.
                If None the generator is endless

        Returns:
            WordsGenerator: the generator

        Raises:
            ValueError: if start_len is negative
        """
        if start_len < 0:
            raise ValueError(f"start_len must be non negative, got {start_len}")
        return WordsGenerator(self, self.first_char * start_len, max_len)

    def __len__(self) -> int:
        """returns the number of symbols"""
        return len(self.next_char_map)

    def __contains__(self, symbol: object) -> bool:
        """checks if a symbol belongs to the alphabet"""
        return symbol in self.next_char_map

    def __iter__(self) -> Iterator[str]:
        """iterates over the symbols in order"""
        return iter(self.symbols())

    def __eq__(self, other: object) -> bool:
        """two alphabets are equal if they define the same ordering"""
        if not isinstance(other, Alphabet):
            return NotImplemented
        return (
            self.first_char == other.first_char
            and dict(self.next_char_map) == dict(other.next_char_map)
        )

    def __hash__(self) -> int:
        return hash(tuple(self.symbols()))

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self.symbols())!r})"
