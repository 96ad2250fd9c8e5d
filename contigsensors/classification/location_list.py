#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Location list: Per-contig frame and coding-edge lookup built from annotated
coding regions.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

import numpy as np

from .frames import Boundary, Frame, MINUS_FRAMES, PLUS_FRAMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodingRegion:
    """Annotated coding region (1-based, inclusive)."""
    start: int
    end: int
    strand: str = '+'

    def __post_init__(self):
        if self.strand not in ('+', '-'):
            raise ValueError(f"Strand must be '+' or '-', got {self.strand!r}")
        if self.start < 1 or self.end < self.start:
            raise ValueError(f"Invalid coding region {self.start}..{self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start + 1


class LocationList:
    """
    Frame map of one contig.

    Every position starts out non-coding (F0).  Each coding sequence paints
    its codon phases over the map, running on across the parts of a joined
    CDS; a position painted with two different phases becomes invalid (XX),
    as does any position off the contig.

    Edges are kept per strand.  On the plus strand the start edge is the
    first base of the coding sequence and the stop edge is the first base
    of its terminal stop codon.  On the minus strand the same edges are
    reported in transcription order, at the leftmost base of each codon.

    Args:
        contig_id: ID of the contig
        length: Contig length in bp
        regions: Initial coding regions
    """

    def __init__(self, contig_id: str, length: int,
                 regions: Optional[Iterable[CodingRegion]] = None):
        self.contig_id = contig_id
        self.length = length
        # Index 0 is unused so positions index directly
        self._frames = np.full(length + 1, Frame.F0.code, dtype=np.int8)
        self._plus_edges: Dict[int, Boundary] = {}
        self._minus_edges: Dict[int, Boundary] = {}
        self.num_regions = 0
        for region in regions or ():
            self.add_region(region)

    def add_region(self, region: CodingRegion):
        """Paint a single-part coding region onto the frame map."""
        self.add_coding_sequence([region])

    def add_coding_sequence(self, parts: Sequence[CodingRegion]):
        """
        Paint one coding sequence, possibly joined from several parts.

        Parts are given in transcription order, as a GenBank join lists
        them.  The codon phase runs on across part boundaries, so a part
        starts at the phase left by the spliced length before it.  The
        sequence gets one start edge at its first base and one stop edge at
        its terminal codon.

        Args:
            parts: Coding regions of one CDS, all on the same strand

        Raises:
            ValueError: If the parts are empty, mix strands or run past the
                end of the contig
        """
        parts = list(parts)
        if not parts:
            raise ValueError("A coding sequence needs at least one region")
        strand = parts[0].strand
        if any(part.strand != strand for part in parts):
            raise ValueError(
                f"Coding sequence on contig {self.contig_id} mixes strands"
            )
        for part in parts:
            if part.end > self.length:
                raise ValueError(
                    f"Coding region {part.start}..{part.end} extends past the end "
                    f"of contig {self.contig_id} ({self.length} bp)"
                )

        frames = PLUS_FRAMES if strand == '+' else MINUS_FRAMES
        frame_codes = np.array([f.code for f in frames], dtype=np.int8)
        transcribed = []
        offset = 0
        for part in parts:
            if strand == '+':
                positions = np.arange(part.start, part.end + 1)
            else:
                positions = np.arange(part.end, part.start - 1, -1)
            codes = frame_codes[(offset + np.arange(part.length)) % 3]
            self._paint(positions, codes)
            transcribed.append(positions)
            offset += part.length

        # Forward coordinates in transcription order
        order = np.concatenate(transcribed)
        if strand == '+':
            self._plus_edges.setdefault(int(order[0]), Boundary.START)
            if offset >= 3:
                self._plus_edges.setdefault(int(order[-3]), Boundary.STOP)
        else:
            # Minus-strand codons are reported at their leftmost base
            if offset >= 3:
                self._minus_edges.setdefault(int(order[2]), Boundary.START)
            self._minus_edges.setdefault(int(order[-1]), Boundary.STOP)
        self.num_regions += 1

    def _paint(self, positions: np.ndarray, codes: np.ndarray):
        current = self._frames[positions]
        conflict = (current != Frame.F0.code) & (current != codes)
        self._frames[positions] = np.where(conflict, Frame.XX.code, codes)

    def frame_at(self, position: int) -> Frame:
        """Return the coding frame of a 1-based position."""
        if position < 1 or position > self.length:
            return Frame.XX
        return Frame.from_code(self._frames[position])

    def boundary_at(self, position: int, negative: bool = False) -> Boundary:
        """
        Return the coding-edge class of a 1-based position.

        Args:
            position: 1-based position
            negative: Also report minus-strand edges
        """
        edge = self._plus_edges.get(position)
        if edge is None and negative:
            edge = self._minus_edges.get(position)
        return edge if edge is not None else Boundary.OTHER

    def coding_fraction(self) -> float:
        """Fraction of positions inside a valid coding frame."""
        if self.length == 0:
            return 0.0
        frames = self._frames[1:]
        coding = (frames != Frame.F0.code) & (frames != Frame.XX.code)
        return float(np.count_nonzero(coding)) / self.length

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return (f"LocationList(contig_id={self.contig_id!r}, length={self.length}, "
                f"regions={self.num_regions})")


__all__ = ['CodingRegion', 'LocationList']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
