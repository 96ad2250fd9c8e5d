"""
ContigSensors v0.1.0

Sequence utility functions for ContigSensors.

Provides common sequence manipulation and analysis functions.
"""

from typing import Optional

STANDARD_BASES = frozenset('ACGTUacgtu')


def extract_codon(sequence: str, position: int) -> str:
    """
    Extract the codon starting at a 1-based position.

    Characters past either end of the sequence contribute nothing, so the
    result is shorter than three letters near the boundaries.

    Args:
        sequence: DNA sequence string
        position: 1-based position of the codon's first base

    Returns:
        Uppercase codon string (possibly short or empty)

    Example:
        >>> extract_codon("aatgtg", 2)
        'ATG'
    """
    if position < 1:
        return ''
    return sequence[position - 1:position + 2].upper()


def count_ambiguous_bases(sequence: str) -> int:
    """
    Count positions holding anything other than A, C, G, T or U.

    Example:
        >>> count_ambiguous_bases("ACGTNNRY")
        4
    """
    return sum(1 for base in sequence if base not in STANDARD_BASES)


def calculate_gc_content(sequence: str) -> Optional[float]:
    """
    Calculate GC content of a DNA sequence.

    Args:
        sequence: DNA sequence string

    Returns:
        GC content as fraction (0.0 to 1.0), or None for an empty sequence

    Example:
        >>> calculate_gc_content("ATGC")
        0.5
    """
    if not sequence:
        return None

    sequence = sequence.upper()
    gc_count = sequence.count('G') + sequence.count('C')

    return gc_count / len(sequence)


__all__ = [
    'STANDARD_BASES',
    'extract_codon',
    'count_ambiguous_bases',
    'calculate_gc_content',
]
