from allwords.alphabet import Alphabet


def main():
    # SPLIT THE WORDS OF LENGTH 4 OVER A HEX ALPHABET IN 4 INDEPENDENT CHUNKS
    alphabet = Alphabet.from_chars_in_str("0123456789abcdef")

    starts = ["0000", "4000", "8000", "c000"]
    ends = starts[1:] + [None]

    for start, end in zip(starts, ends):
        count = 0
        for word in alphabet.words_from(start, 4):
            if word == end:
                break
            count += 1
        print(f"Chunk starting at {start}: {count} words")


if __name__ == "__main__":
    main()
