"""constants for allwords"""

# ERROR MESSAGES

ALPHABET_TOO_SMALL_MESSAGE = "Invalid alphabet string. Found less than 2 unique chars"

# minimum amount of unique symbols an alphabet must contain
MIN_ALPHABET_SIZE = 2

# LOGGERS

ALPHABET_LOGGER = "allwords_alphabet"
GENERATOR_LOGGER = "allwords_generator"
CLI_LOGGER = "allwords_cli"
