"""
Utilities module for ContigSensors.

This module provides small sequence helpers shared by the sensor,
classification and driver layers.
"""

from .sequence_utils import (
    STANDARD_BASES,
    extract_codon,
    count_ambiguous_bases,
    calculate_gc_content,
)

__all__ = [
    "STANDARD_BASES",
    "extract_codon",
    "count_ambiguous_bases",
    "calculate_gc_content",
]
