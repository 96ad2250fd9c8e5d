#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Contig sensor: The encoded DNA context around one contig position.

In deep-learning terms a sensor is a feature vector; the name avoids the
genome-side meaning of "feature".

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from typing import Tuple, Union

SensorValue = Union[float, str]


@dataclass(frozen=True)
class ContigSensor:
    """
    Encoded window around a single contig position.

    Attributes:
        contig_id: ID of the source contig
        position: 1-based position of the target base
        values: Encoded window, one entry per output column
        suspicious: True if the window held an ambiguity character
        codon: Forward codon starting at the target position (uppercase)
    """
    contig_id: str
    position: int
    values: Tuple[SensorValue, ...]
    suspicious: bool = False
    codon: str = ''

    @property
    def meta(self) -> str:
        """Contig ID and position, as used in location metadata columns."""
        return f"{self.contig_id};{self.position}"

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        """Tab-delimited sensor values, in order."""
        return '\t'.join(str(v) for v in self.values)


__all__ = ['ContigSensor', 'SensorValue']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
