#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Chunked random sampler: Turn a whole contig into a stream of labelled
sensors.

The contig is walked in fixed-size chunks.  Within each chunk one run start
is drawn at random, and positions from there on are examined one at a time
until the run has accepted ``run_length`` examples or the contig ends.  A
position is accepted when it passes the codon filter (if any), its sensor is
not suspicious and its location class is valid.  Randomness only moves the
run start within a chunk; every chunk gets a run.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..classification.location_class import FrameLookup, LocationClass
from ..config.run_config import ConfigValidationError, SamplingConfig
from ..sensors.codon_filter import CodonFilter
from ..sensors.factories import SensorFactory
from ..sensors.sensor import ContigSensor

logger = logging.getLogger(__name__)

Example = Tuple[str, ContigSensor]


@dataclass
class SampleRun:
    """
    One sampling run inside a chunk.

    Attributes:
        chunk_start: First position of the chunk (1-based)
        chunk_end: Position just past the chunk
        run_start: Randomly chosen first position of the run
        run_end: Last position examined (run_start - 1 if none)
        examples: Accepted (label, sensor) pairs, in position order
    """
    chunk_start: int
    chunk_end: int
    run_start: int
    run_end: int
    examples: List[Example] = field(default_factory=list)

    @property
    def num_scanned(self) -> int:
        return self.run_end - self.run_start + 1


class ChunkedRandomSampler:
    """
    Sample labelled sensors from contigs in chunked random runs.

    Args:
        factory: Sensor factory used to encode accepted positions
        classifier: Location classifier used to label them
        chunk_size: Contig section size; one run per section
        run_length: Maximum accepted examples per run
        codon_filter: Optional marker-codon gate applied first
        rng: Random generator (seed it for reproducible runs)
    """

    def __init__(
        self,
        factory: SensorFactory,
        classifier: LocationClass,
        chunk_size: int = 50000,
        run_length: int = 200,
        codon_filter: Optional[CodonFilter] = None,
        rng: Optional[random.Random] = None
    ):
        if chunk_size < 1:
            raise ConfigValidationError(f"chunk_size must be at least 1, got {chunk_size}")
        if run_length < 1:
            raise ConfigValidationError(f"run_length must be at least 1, got {run_length}")
        self.factory = factory
        self.classifier = classifier
        self.chunk_size = chunk_size
        self.run_length = run_length
        self.codon_filter = codon_filter
        self.rng = rng if rng is not None else random.Random()
        # Diagnostic counts of rejected positions; never part of class counts
        self.skip_counts: Counter = Counter()

    @classmethod
    def from_config(
        cls,
        sampling: SamplingConfig,
        factory: SensorFactory,
        classifier: LocationClass,
        codon_filter: Optional[CodonFilter] = None,
        rng: Optional[random.Random] = None
    ) -> 'ChunkedRandomSampler':
        """
        Build a sampler from the sampling config.

        Without an explicit ``rng`` the generator is seeded from the config.
        """
        return cls(
            factory,
            classifier,
            chunk_size=sampling.chunk_size,
            run_length=sampling.run_length,
            codon_filter=codon_filter,
            rng=rng if rng is not None else random.Random(sampling.seed),
        )

    def sample_runs(self, contig_id: str, sequence: str,
                    lookup: FrameLookup) -> Iterator[SampleRun]:
        """
        Walk a contig chunk by chunk, yielding one run per chunk.

        Args:
            contig_id: ID of the contig
            sequence: DNA sequence of the contig
            lookup: Frame lookup for this contig
        """
        self.classifier.bind(lookup)
        limit = len(sequence)
        pos = 1
        while pos <= limit:
            end = min(pos + self.chunk_size, limit + 1)
            start = self.rng.randrange(pos, end)
            run = SampleRun(chunk_start=pos, chunk_end=end, run_start=start, run_end=start - 1)
            cursor = start
            while cursor <= limit and len(run.examples) < self.run_length:
                example = self._examine(contig_id, cursor, sequence)
                if example is not None:
                    run.examples.append(example)
                cursor += 1
            run.run_end = cursor - 1
            logger.debug(
                f"{contig_id}: chunk {pos}-{end - 1}, run {start}-{run.run_end}, "
                f"{len(run.examples)} accepted"
            )
            yield run
            # A run that overran its chunk pushes the next chunk past it
            pos = max(end, cursor)

    def sample(self, contig_id: str, sequence: str,
               lookup: FrameLookup) -> Iterator[Example]:
        """Yield every accepted (label, sensor) pair for a contig."""
        for run in self.sample_runs(contig_id, sequence, lookup):
            yield from run.examples

    def _examine(self, contig_id: str, position: int, sequence: str) -> Optional[Example]:
        if self.codon_filter is not None and not self.codon_filter.matches(position, sequence):
            self.skip_counts['filtered'] += 1
            return None
        sensor = self.factory.create(contig_id, position, sequence)
        if sensor.suspicious:
            self.skip_counts['suspicious'] += 1
            return None
        label = self.classifier.class_of(position)
        if label is None:
            self.skip_counts['invalid'] += 1
            return None
        return label, sensor


def format_row(*columns) -> str:
    """Join leading metadata columns and a sensor into one tab-delimited row."""
    return '\t'.join(str(c) for c in columns)


__all__ = ['SampleRun', 'ChunkedRandomSampler', 'format_row']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
