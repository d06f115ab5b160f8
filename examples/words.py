from itertools import islice

from allwords.alphabet import Alphabet
from allwords.custom_exceptions import AlphabetTooSmallException


def main():
    # BUILD YOUR ALPHABET FROM A STRING
    alphabet = Alphabet.from_chars_in_str("abc")

    # ALL THE WORDS UP TO LENGTH 3
    print("Words: ", list(alphabet.words_up_to(3)))

    # ALL THE WORDS OF LENGTH 3
    print("Length 3: ", list(alphabet.words_of_length_at_least(3, 3)))

    # ENDLESS GENERATION, STOPPED BY THE CALLER
    words = alphabet.words_unbounded()
    print("First 10: ", list(islice(words, 10)))

    # RESUME FROM WHERE YOU STOPPED
    resumed = alphabet.words_from(words.peek(), 3)
    print("Resumed: ", list(resumed))

    # INVALID ALPHABETS ARE REJECTED
    try:
        Alphabet.from_chars_in_str("zzz")
    except AlphabetTooSmallException as e:
        print("Error: ", e)


if __name__ == "__main__":
    main()
