"""
Spell Checker
=============
Runs a dictionary load phase followed by a text query phase.

Features:
- Dictionary words streamed into a HashTable
- Text words streamed through the tokenizer and MorphologyMatcher
- Misspelled words produced lazily, in text order
- End-of-run SpellCheckReport with probe statistics
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from .base import MisspelledWord, SpellCheckReport
from .config_logging import (
    HashSpellConfig, StructuredLogger, FileError,
    get_config, handle_errors,
)
from .hash_table import HashTable
from .morphology import MorphologyMatcher
from .tokenizer import iter_chars, tokenize

__version__ = "1.0.0"

PathLike = Union[str, Path]

DICTIONARY_OPEN_ERROR = "Cannot open dictionary file as given."
TEXT_OPEN_ERROR = "Cannot open input file as given."


class SpellChecker:
    """
    Checks text words against a dictionary table.

    The dictionary must be fully loaded before checking starts.
    """

    def __init__(
        self,
        table: Optional[HashTable] = None,
        matcher: Optional[MorphologyMatcher] = None,
        config: Optional[HashSpellConfig] = None
    ):
        self.config = config or get_config()
        self.table = table if table is not None else HashTable()
        self.matcher = matcher or MorphologyMatcher()
        self.logger = StructuredLogger(__name__, self.config)

        self._words_checked = 0
        self._misspelled = 0
        self._misspelled_words: List[MisspelledWord] = []

    @property
    def words_checked(self) -> int:
        return self._words_checked

    @property
    def misspelled(self) -> int:
        return self._misspelled

    @property
    def misspelled_words(self) -> List[MisspelledWord]:
        return list(self._misspelled_words)

    def _open(self, path: PathLike, message: str) -> TextIO:
        try:
            return open(path, 'r', encoding=self.config.encoding)
        except OSError as e:
            self.logger.error(message, path=str(path), reason=e.strerror)
            raise FileError(message, filename=str(path), reason=e.strerror)

    def load_dictionary(self, path: PathLike) -> int:
        """
        Insert every whitespace-separated word of a dictionary file.

        Args:
            path: Dictionary file

        Returns:
            Number of words inserted from this file
        """
        return handle_errors(self.logger)(self._load_dictionary)(path)

    def _load_dictionary(self, path: PathLike) -> int:
        with self._open(path, DICTIONARY_OPEN_ERROR) as stream:
            with self.logger.log_operation('dictionary load', path=str(path)):
                count = self.table.read_words(stream)
        self.logger.info("Dictionary loaded", words=count, dictionary_words=self.table.dict_length)
        if count == 0:
            self.logger.warning("Dictionary file has no words", path=str(path))
        return count

    def load_words(self, words: Iterable[str]) -> int:
        """Insert words from any iterable, one entry per word."""
        count = 0
        for word in words:
            self.table.insert(word)
            count += 1
        return count

    def check_word(self, word: str) -> bool:
        """
        Check one word, updating the run counters.

        Returns:
            True if accepted, False if reported as misspelled
        """
        self._words_checked += 1
        rule = self.matcher.match(word, self.table)
        if rule is not None:
            return True

        self._misspelled += 1
        self._misspelled_words.append(MisspelledWord(word, self._words_checked))
        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug("Misspelled word", word=word, word_number=self._words_checked)
        return False

    def check_words(self, words: Iterable[str]) -> Iterator[str]:
        """Yield each rejected word, in order."""
        for word in words:
            if not self.check_word(word):
                yield word

    def check_text(self, text: str) -> Iterator[str]:
        """Yield the rejected words of an in-memory string."""
        return self.check_words(tokenize(text))

    def check_file(self, path: PathLike) -> 'CheckedWords':
        """
        Open a text file and yield its rejected words.

        The file is opened immediately, so an unreadable path fails here
        rather than on first iteration. The file is closed when the words
        are exhausted, on close(), or on leaving a with block.
        """
        stream = self._open(path, TEXT_OPEN_ERROR)
        self.logger.info("Checking text", path=str(path))
        return CheckedWords(stream, self._check_stream(stream, str(path)))

    def _check_stream(self, stream: TextIO, path: str) -> Iterator[str]:
        try:
            yield from self.check_words(tokenize(iter_chars(stream, self.config.chunk_size)))
        except UnicodeDecodeError as e:
            self.logger.error("Cannot decode input", path=path, reason=e.reason)
            raise FileError(f"Cannot decode input file: {e.reason}",
                            filename=path, encoding=e.encoding)
        self.logger.info("Text checked", path=path, words_checked=self._words_checked,
                         misspelled=self._misspelled)

    def report(self, include_table_stats: bool = False) -> SpellCheckReport:
        """Snapshot the counters of this run."""
        return SpellCheckReport(
            dictionary_words=self.table.dict_length,
            words_checked=self._words_checked,
            misspelled=self._misspelled,
            total_probes=self.table.total_probes,
            total_lookups=self.table.total_lookups,
            misspelled_words=self.misspelled_words,
            table_stats=self.table.slot_stats() if include_table_stats else None,
        )


class CheckedWords:
    """
    Rejected words of one text file.

    Owns the open file and closes it once iteration ends, fails, or the
    caller closes it early.
    """

    def __init__(self, stream: TextIO, words: Iterator[str]):
        self._stream = stream
        self._words = words

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def __iter__(self) -> 'CheckedWords':
        return self

    def __next__(self) -> str:
        try:
            return next(self._words)
        except BaseException:
            self.close()
            raise

    def close(self):
        self._words.close()
        self._stream.close()

    def __enter__(self) -> 'CheckedWords':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
