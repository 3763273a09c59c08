"""
Report Formatting
=================
Renders a SpellCheckReport as plain text or JSON.
"""

import json
from typing import List, Optional

from .base import SpellCheckReport

__version__ = "1.0.0"

NOT_AVAILABLE = 'n/a'


def _format_average(value: Optional[float]) -> str:
    return NOT_AVAILABLE if value is None else f"{value:.3f}"


def format_text(report: SpellCheckReport) -> List[str]:
    """
    Build the end-of-run statistics block.

    Args:
        report: Finished run

    Returns:
        Output lines, without trailing newlines
    """
    lines = [
        f"Words in Dictionary: {report.dictionary_words}",
        f"Words in Text File: {report.words_checked}",
        f"Misspelled words: {report.misspelled}",
        f"Total probes: {report.total_probes}",
        f"Average probes per word: {_format_average(report.average_probes_per_word)}",
        f"Average probes per lookup: {_format_average(report.average_probes_per_lookup)}",
    ]

    stats = report.table_stats
    if stats:
        lines.extend([
            "Table:",
            f"  Capacity: {stats['capacity']}",
            f"  Occupied slots: {stats['occupied_slots']}",
            f"  Load factor: {stats['load_factor']:.3f}",
            f"  Longest chain: {stats['longest_chain']}",
            f"  Average chain length: {stats['average_chain_length']:.3f}",
        ])

    return lines


def format_json(report: SpellCheckReport) -> str:
    """Serialize a report, misspelled words included."""
    return json.dumps(report.to_dict(), indent=2)
