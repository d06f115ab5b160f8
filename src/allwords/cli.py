"""command line interface printing the words over an alphabet"""

from argparse import ArgumentParser, Namespace
from itertools import islice
import logging
import sys
from typing import List, Optional

from allwords.alphabet import Alphabet
from allwords.constants import ALPHABET_LOGGER, CLI_LOGGER, GENERATOR_LOGGER
from allwords.custom_exceptions import AlphabetTooSmallException


def get_args(argv: Optional[List[str]] = None) -> Namespace:
    """Get arguments from command line"""
    parser = ArgumentParser(
        prog="allwords",
        description="Prints all the words over an alphabet, one per line",
    )
    parser.add_argument(
        "alphabet",
        help="A string containing the symbols of the alphabet in order",
    )
    parser.add_argument(
        "--max-len",
        help="The maximum length of the generated words",
        type=int,
        default=None,
    )
    start = parser.add_mutually_exclusive_group()
    start.add_argument(
        "--start-word",
        help="The first word to print",
        default=None,
    )
    start.add_argument(
        "--start-len",
        help="Start from the first word of this length",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--limit",
        help="Stop after printing this many words",
        type=int,
        default=None,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Log generation details on stderr",
        action="store_true",
    )
    args = parser.parse_args(argv)
    if args.max_len is None and args.limit is None:
        parser.error("one of --max-len or --limit is required")
    for name in ("max_len", "start_len", "limit"):
        value = getattr(args, name)
        if value is not None and value < 0:
            parser.error(f"--{name.replace('_', '-')} must be non negative")
    return args


def run(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface

    Returns:
        int: the exit status
    """
    args = get_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        for name in (ALPHABET_LOGGER, GENERATOR_LOGGER, CLI_LOGGER):
            logging.getLogger(name).setLevel(logging.INFO)
    logger = logging.getLogger(CLI_LOGGER)

    try:
        alphabet = Alphabet.from_chars_in_str(args.alphabet)
    except AlphabetTooSmallException as e:
        print(f"allwords: {e}", file=sys.stderr)
        return 2

    if args.start_word is not None:
        words = alphabet.words_from(args.start_word, args.max_len)
    elif args.start_len is not None:
        words = alphabet.words_of_length_at_least(args.start_len, args.max_len)
    else:
        words = alphabet.words_up_to(args.max_len)

    printed = 0
    for word in islice(words, args.limit):
        print(word)
        printed += 1
    logger.info("Printed %d words", printed)
    return 0


def main() -> None:
    """console script entry point"""
    sys.exit(run())


if __name__ == "__main__":
    main()
