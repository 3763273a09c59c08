"""
Morphology Matcher
==================
Suffix and capitalization fallbacks for words missing from the table.

Only one rule family is tried per word, chosen from the word's surface
form: capitalization first, then the trailing characters. A word that needs
two transformations (e.g. "Cats") is not matched.
"""

from typing import Optional

from .hash_table import HashTable

__version__ = "1.0.0"

# Rule names returned by MorphologyMatcher.match()
EXACT = 'exact'
LOWERCASE = 'lowercase'
POSSESSIVE = 'possessive'
PLURAL_ES = 'plural_es'
PLURAL_S = 'plural_s'
SUFFIX_ED_STEM = 'suffix_ed_stem'
SUFFIX_ED_E = 'suffix_ed_e'
SUFFIX_ING = 'suffix_ing'
SUFFIX_ING_E = 'suffix_ing_e'
SUFFIX_LY = 'suffix_ly'


class MorphologyMatcher:
    """
    Accepts a word if it, or one inflectional variant of it, is in the table.

    Stateless; one instance can serve any number of tables.
    """

    def check(self, word: str, table: HashTable) -> bool:
        """Return True if the word is accepted."""
        return self.match(word, table) is not None

    def match(self, word: str, table: HashTable) -> Optional[str]:
        """
        Find the rule that accepts a word.

        Args:
            word: Non-empty word of letters and apostrophes
            table: Dictionary table to query

        Returns:
            Name of the accepting rule, or None if the word is rejected
        """
        if table.lookup(word):
            return EXACT

        length = len(word)
        lower = word.lower()

        if word[0].isupper():
            if table.lookup(lower):
                return LOWERCASE

        elif word[-1] == 's':
            if length >= 2 and word[-2] == "'":
                if table.lookup(lower[:-2]):
                    return POSSESSIVE
            elif length >= 2 and word[-2] == 'e':
                if table.lookup(lower[:-2]):
                    return PLURAL_ES
            elif table.lookup(lower[:-1]):
                return PLURAL_S

        elif length >= 2 and word[-2] == 'e':
            # "-ed" / "-er": bare stem first, then stem + 'e'
            if word[-1] in ('d', 'r'):
                if table.lookup(lower[:-2]):
                    return SUFFIX_ED_STEM
                if table.lookup(lower[:-1]):
                    return SUFFIX_ED_E

        elif length >= 3 and word.endswith('ing'):
            stem = lower[:-3]
            if table.lookup(stem):
                return SUFFIX_ING
            if table.lookup(stem + 'e'):
                return SUFFIX_ING_E

        elif length >= 2 and word.endswith('ly'):
            if table.lookup(lower[:-2]):
                return SUFFIX_LY

        return None
