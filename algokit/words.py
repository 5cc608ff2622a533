"""Collect the distinct five-letter words of a text."""

import argparse
import sys
from collections.abc import Iterable

__all__ = ["five_letter_words", "main"]


def five_letter_words(tokens: Iterable[str]) -> list[str]:
    """Distinct tokens of length five, sorted."""
    return sorted({token for token in tokens if len(token) == 5})


def main(argv: list[str] | None = None) -> int:
    """Read whitespace-separated words from standard input and print the five-letter ones."""
    parser = argparse.ArgumentParser(
        description="Print the distinct five-letter words read from standard input."
    )
    parser.parse_args(argv)
    tokens = (token for line in sys.stdin for token in line.split())
    for word in five_letter_words(tokens):
        print(word)
    return 0