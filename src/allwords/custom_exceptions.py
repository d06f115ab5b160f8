'''this module defines custom exceptions for this package'''

from allwords.constants import ALPHABET_TOO_SMALL_MESSAGE


class AlphabetTooSmallException(Exception):
    '''An exception for alphabets built from less than 2 unique symbols'''

    def __init__(self, message=ALPHABET_TOO_SMALL_MESSAGE):
        super().__init__(message)
