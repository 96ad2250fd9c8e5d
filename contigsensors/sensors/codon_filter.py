#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Codon filter: Gate positions on the codon that starts there.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import FrozenSet, Optional

from Bio.Seq import reverse_complement

from ..config.run_config import ConfigValidationError, LocationClassType
from ..utils.sequence_utils import extract_codon

START_CODONS = ('ATG', 'GTG', 'TTG')
STOP_CODONS = ('TAA', 'TAG', 'TGA')
# Forward-strand reading of minus-strand marker codons
MINUS_START_CODONS = tuple(reverse_complement(c) for c in START_CODONS)
MINUS_STOP_CODONS = tuple(reverse_complement(c) for c in STOP_CODONS)


class CodonFilter:
    """
    Accept positions whose forward codon is one of a fixed set.

    Used to restrict output to known marker codons (e.g. start and stop
    codons) before paying for full sensor encoding and classification.
    """

    def __init__(self, *codons: str):
        if not codons:
            raise ConfigValidationError("A codon filter needs at least one codon")
        normalized = set()
        for codon in codons:
            if len(codon) != 3:
                raise ConfigValidationError(f"Invalid filter codon: {codon!r}")
            normalized.add(codon.upper())
        self._codons: FrozenSet[str] = frozenset(normalized)

    @property
    def codons(self) -> FrozenSet[str]:
        return self._codons

    def matches(self, position: int, sequence: str) -> bool:
        """Return True if the codon at the 1-based position is accepted."""
        return extract_codon(sequence, position) in self._codons

    def __repr__(self) -> str:
        return f"CodonFilter({', '.join(sorted(self._codons))})"


def codon_filter_for(class_type: LocationClassType,
                     negative: bool = False) -> Optional[CodonFilter]:
    """
    Return the marker-codon filter that suits a classification scheme.

    Edge, start and stop schemes only label positions that can begin a start
    or stop codon; phase and coding schemes need no filter.

    Minus-strand edges sit at the leftmost base of a reverse-strand codon,
    where the forward sequence reads its reverse complement (CAT for ATG,
    TTA for TAA).  With ``negative`` set those codons are accepted too.

    Args:
        class_type: Classification scheme
        negative: Also accept minus-strand marker codons
    """
    class_type = LocationClassType.parse(class_type)
    if class_type is LocationClassType.EDGE:
        codons = START_CODONS + STOP_CODONS
        if negative:
            codons += MINUS_START_CODONS + MINUS_STOP_CODONS
    elif class_type is LocationClassType.START:
        codons = START_CODONS + (MINUS_START_CODONS if negative else ())
    elif class_type is LocationClassType.STOP:
        codons = STOP_CODONS + (MINUS_STOP_CODONS if negative else ())
    else:
        return None
    return CodonFilter(*codons)


__all__ = [
    'CodonFilter',
    'codon_filter_for',
    'START_CODONS',
    'STOP_CODONS',
    'MINUS_START_CODONS',
    'MINUS_STOP_CODONS',
]

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
