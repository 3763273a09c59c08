"""
Text Tokenizer
==============
Lazy extraction of candidate words from free text.

A word starts at an ASCII letter and runs through letters and apostrophes.
Anything else (digits, whitespace, punctuation, non-ASCII) ends it.
"""

import string
from enum import Enum
from typing import Iterable, Iterator, TextIO

from .config_logging import DEFAULT_CHUNK_SIZE

__version__ = "1.0.0"

_LETTERS = frozenset(string.ascii_letters)
APOSTROPHE = "'"


class CharClass(Enum):
    """Classification of a single input character."""
    LETTER = 'letter'
    APOSTROPHE = 'apostrophe'
    OTHER = 'other'


def classify(ch: str) -> CharClass:
    """Classify one character."""
    if ch in _LETTERS:
        return CharClass.LETTER
    if ch == APOSTROPHE:
        return CharClass.APOSTROPHE
    return CharClass.OTHER


def iter_chars(stream: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield the characters of a text stream, reading it in chunks."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield from chunk


def tokenize(chars: Iterable[str]) -> Iterator[str]:
    """
    Group characters into words.

    Args:
        chars: Character sequence (a string or iter_chars())

    Yields:
        Non-empty words made of letters and apostrophes, never starting
        with an apostrophe
    """
    buffer = []
    for ch in chars:
        kind = classify(ch)
        if kind is CharClass.LETTER or (kind is CharClass.APOSTROPHE and buffer):
            buffer.append(ch)
        elif buffer:
            yield ''.join(buffer)
            buffer = []
    if buffer:
        yield ''.join(buffer)


def tokenize_text(text: str) -> Iterator[str]:
    """Words of an in-memory string."""
    return tokenize(text)
