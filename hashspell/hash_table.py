"""
Dictionary Hash Table
=====================
Fixed-size hash table for dictionary words.

Features:
- Prime multiplier / XOR hash over a wrapping signed 64-bit accumulator
- Golden Ratio (multiplicative) compression into an arbitrary table size
- Separate chaining for collision resolution, appended in insertion order
- Probe and lookup counters for measuring hash quality

The table never resizes. Every string comparison made by lookup(), and the
check of an empty slot, counts as one probe.
"""

import math
import statistics
from dataclasses import dataclass
from typing import Dict, Any, Iterable, Iterator, List, Optional

__version__ = "1.0.0"

# Table size, prime
TABLE_SIZE = 28669

# Hash parameters
HASH_A = 54059
HASH_B = 76963
HASH_C = 86969
HASH_SEED = 37

# Golden ratio
PHI = (1 + math.sqrt(5)) / 2
PHI_INVERSE = PHI - 1

_MASK_64 = (1 << 64) - 1
_SIGN_64 = 1 << 63


def _to_signed_64(value: int) -> int:
    """Reinterpret the low 64 bits of value as a signed integer."""
    value &= _MASK_64
    return value - (1 << 64) if value & _SIGN_64 else value


def hash_word(word: str) -> int:
    """
    Calculate the non-compressed hash value for a word.

    The accumulator wraps like a signed 64-bit integer; the overflow is part
    of the hash. The remainder is taken modulo HASH_C and is always in
    [0, HASH_C), so a negative accumulator maps to its positive residue.

    Args:
        word: Word to hash

    Returns:
        Hash value in [0, HASH_C)
    """
    value = HASH_SEED
    for ch in word:
        value = (((value * HASH_A) ^ (ord(ch) * HASH_B)) << 5) & _MASK_64
    return _to_signed_64(value) % HASH_C


def compress(hash_value: int, size: int = TABLE_SIZE) -> int:
    """
    Map a hash value to a slot with the Golden Ratio method.

    Args:
        hash_value: Value returned by hash_word()
        size: Number of slots

    Returns:
        Slot index in [0, size)
    """
    product = hash_value * PHI_INVERSE
    fraction = product - math.floor(product)
    return int(math.floor(size * fraction))


@dataclass
class Entry:
    """A dictionary word and the next entry sharing its slot."""
    key: str
    next: Optional['Entry'] = None


class HashTable:
    """
    Separate-chaining hash table of dictionary words.

    Counters accumulate for the lifetime of the table and have no reset.
    """

    def __init__(self):
        self._slots: List[Optional[Entry]] = [None] * TABLE_SIZE
        self._dict_length = 0
        self._total_probes = 0
        self._total_lookups = 0

    @property
    def capacity(self) -> int:
        return TABLE_SIZE

    @property
    def dict_length(self) -> int:
        """Number of entries inserted."""
        return self._dict_length

    @property
    def total_probes(self) -> int:
        """Comparisons (and empty-slot checks) made by lookup()."""
        return self._total_probes

    @property
    def total_lookups(self) -> int:
        """Number of lookup() calls."""
        return self._total_lookups

    def __len__(self) -> int:
        return self._dict_length

    def slot_for(self, word: str) -> int:
        """Slot index a word hashes and compresses to."""
        return compress(hash_word(word))

    def insert(self, word: str):
        """
        Add a word at the tail of its slot's chain.

        Duplicates are not detected; inserting a word twice stores it twice.
        """
        index = self.slot_for(word)
        current = self._slots[index]
        if current is None:
            self._slots[index] = Entry(word)
        else:
            # Collision, append to chain
            while current.next is not None:
                current = current.next
            current.next = Entry(word)
        self._dict_length += 1

    def read_words(self, lines: Iterable[str]) -> int:
        """
        Insert every whitespace-separated token of every line.

        Args:
            lines: Iterable of text lines (an open file works)

        Returns:
            Number of words inserted
        """
        count = 0
        for line in lines:
            for word in line.split():
                self.insert(word)
                count += 1
        return count

    def lookup(self, word: str) -> bool:
        """
        Check the table for an exact, case-sensitive match.

        Each call counts as one lookup. Each chain node compared counts as
        one probe, and an empty slot counts as one probe.

        Args:
            word: Word to search for

        Returns:
            True for a match, False otherwise
        """
        self._total_lookups += 1

        current = self._slots[self.slot_for(word)]
        if current is None:
            self._total_probes += 1
            return False

        while current is not None:
            self._total_probes += 1
            if current.key == word:
                return True
            current = current.next
        return False

    def chain(self, index: int) -> Iterator[str]:
        """Keys stored in a slot, in chain order."""
        current = self._slots[index]
        while current is not None:
            yield current.key
            current = current.next

    def chain_lengths(self) -> Iterator[int]:
        """Chain length of every occupied slot."""
        for index, head in enumerate(self._slots):
            if head is not None:
                yield sum(1 for _ in self.chain(index))

    def slot_stats(self) -> Dict[str, Any]:
        """
        Summarize slot usage.

        Does not touch the probe or lookup counters.
        """
        lengths = list(self.chain_lengths())
        occupied = len(lengths)
        return {
            'capacity': TABLE_SIZE,
            'entries': self._dict_length,
            'occupied_slots': occupied,
            'empty_slots': TABLE_SIZE - occupied,
            'load_factor': self._dict_length / TABLE_SIZE,
            'longest_chain': max(lengths) if lengths else 0,
            'average_chain_length': statistics.mean(lengths) if lengths else 0.0,
        }
