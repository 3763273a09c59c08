"""
hashspell
=========
Dictionary spell checker built on a fixed-size chained hash table.

Provides:
- HashTable: golden-ratio compressed, separately chained word table with
  probe counting
- MorphologyMatcher: suffix and capitalization fallbacks
- SpellChecker: dictionary load phase and text query phase
- Text and JSON reports of probe statistics

Run: python -m hashspell <dictionary-file> <text-file>
"""

__version__ = "1.0.0"

from .hash_table import HashTable, Entry, hash_word, compress, TABLE_SIZE
from .morphology import MorphologyMatcher
from .checker import SpellChecker
from .base import SpellCheckReport, MisspelledWord

__all__ = [
    'HashTable', 'Entry', 'hash_word', 'compress', 'TABLE_SIZE',
    'MorphologyMatcher', 'SpellChecker', 'SpellCheckReport', 'MisspelledWord',
]
