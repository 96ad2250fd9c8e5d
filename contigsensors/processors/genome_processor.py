#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Verification-set generation: Encode every usable position of one genome.

Each row carries the location metadata and the expected class ahead of the
sensors, so model predictions can be compared against it.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import random
from collections import Counter
from pathlib import Path
from typing import TextIO, Union

from ..classification.location_class import location_class_for
from ..config.run_config import RunConfig
from ..io.genome_io import read_genbank
from ..sampling.balanced_writer import BalancedOutputBuffer
from ..sampling.chunk_sampler import format_row
from ..sensors.codon_filter import codon_filter_for
from ..sensors.factories import create_factory
from ..utils.sequence_utils import calculate_gc_content, count_ambiguous_bases

logger = logging.getLogger(__name__)


class GenomeProcessor:
    """
    Produce a verification file from a single GenBank genome.

    Args:
        config: Run configuration
        genome_file: GenBank file containing the genome
        output: Text stream receiving the verification set
    """

    def __init__(self, config: RunConfig, genome_file: Union[str, Path], output: TextIO):
        self.config = config
        self.genome_file = Path(genome_file)
        if not self.genome_file.exists():
            raise FileNotFoundError(f"{self.genome_file} does not exist.")
        self.output = output
        self.factory = create_factory(config.sensor_type, config.sensors)
        self.classifier = location_class_for(config.class_type, config.negative)
        self.codon_filter = (codon_filter_for(config.class_type, config.negative)
                             if config.edge_filter else None)
        self.skip_counts: Counter = Counter()

    def run(self) -> Counter:
        """
        Write one row per accepted position of the genome.

        Returns:
            Rows written per class
        """
        genome = read_genbank(self.genome_file)
        logger.info(f"Processing {genome!r}.")

        buffer = BalancedOutputBuffer(
            self.output,
            self.config.sampling.fuzz_factor,
            rng=random.Random(self.config.sampling.seed),
        )
        buffer.write_header(format_row('location', 'expect', *self.factory.headers()))

        with buffer:
            for contig in genome.contigs:
                gc = calculate_gc_content(contig.sequence) or 0.0
                logger.info(
                    f"Processing contig {contig.id} ({contig.length:,} bp, GC {gc:.1%}, "
                    f"{count_ambiguous_bases(contig.sequence):,} ambiguous)"
                )
                self.classifier.bind(genome.location_lists[contig.id])
                sequence = contig.sequence
                for pos in range(1, contig.length + 1):
                    if self.codon_filter is not None and not self.codon_filter.matches(pos, sequence):
                        self.skip_counts['filtered'] += 1
                        continue
                    sensor = self.factory.create(contig.id, pos, sequence)
                    if sensor.suspicious:
                        self.skip_counts['suspicious'] += 1
                        continue
                    expect = self.classifier.class_of(pos)
                    if expect is None:
                        self.skip_counts['invalid'] += 1
                        continue
                    buffer.write(expect, format_row(sensor.meta, expect, sensor))

        for reason, count in sorted(self.skip_counts.items()):
            logger.info(f"{count:>12,} positions skipped ({reason})")
        return buffer.class_counts


__all__ = ['GenomeProcessor']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
