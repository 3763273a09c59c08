"""
Result Types
============
Dataclasses describing the outcome of a spell-check run.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

__version__ = "1.0.0"


@dataclass
class MisspelledWord:
    """A word with no accepted dictionary match."""
    word: str
    word_number: int  # 1-based position among all checked words

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'word_number': self.word_number,
        }


@dataclass
class SpellCheckReport:
    """Counters and findings of one spell-check run."""
    dictionary_words: int
    words_checked: int
    misspelled: int
    total_probes: int
    total_lookups: int
    misspelled_words: List[MisspelledWord] = field(default_factory=list)
    table_stats: Optional[Dict[str, Any]] = None

    @property
    def average_probes_per_word(self) -> Optional[float]:
        """Probes per checked word, or None if no words were checked."""
        if self.words_checked == 0:
            return None
        return self.total_probes / self.words_checked

    @property
    def average_probes_per_lookup(self) -> Optional[float]:
        """Probes per lookup call, or None if no lookups were made."""
        if self.total_lookups == 0:
            return None
        return self.total_probes / self.total_lookups

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for JSON output."""
        result = {
            'dictionary_words': self.dictionary_words,
            'words_checked': self.words_checked,
            'misspelled': self.misspelled,
            'total_probes': self.total_probes,
            'total_lookups': self.total_lookups,
            'average_probes_per_word': self.average_probes_per_word,
            'average_probes_per_lookup': self.average_probes_per_lookup,
            'misspelled_words': [m.to_dict() for m in self.misspelled_words],
        }
        if self.table_stats is not None:
            result['table_stats'] = self.table_stats
        return result
