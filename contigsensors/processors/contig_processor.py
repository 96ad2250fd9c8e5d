#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Training-set generation: Sample labelled sensors from every contig of every
genome in a set of genome directories.

Output is tab-delimited with a header row.  The first column is the expected
class and the remaining columns are sensors.  Each contig is walked in
chunks; every chunk contributes one run of up to ``run_length`` examples.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import random
from collections import Counter
from pathlib import Path
from typing import List, Sequence, TextIO, Union

from ..classification.location_class import location_class_for
from ..classification.location_list import LocationList
from ..config.run_config import RunConfig
from ..io.genome_io import Contig, iter_genome_files, read_genbank
from ..sampling.balanced_writer import BalancedOutputBuffer
from ..sampling.chunk_sampler import ChunkedRandomSampler, format_row
from ..sensors.codon_filter import codon_filter_for
from ..sensors.factories import create_factory

logger = logging.getLogger(__name__)


class ContigProcessor:
    """
    Produce a training set from directories of GenBank genomes.

    All configuration is checked here, before any genome is read.

    Args:
        config: Run configuration
        genome_dirs: Directories containing GenBank files
        output: Text stream receiving the training set

    Raises:
        ConfigValidationError: For an invalid configuration
        FileNotFoundError: If a genome directory does not exist
    """

    def __init__(self, config: RunConfig, genome_dirs: Sequence[Union[str, Path]],
                 output: TextIO):
        self.config = config
        self.genome_dirs: List[Path] = [Path(d) for d in genome_dirs]
        for genome_dir in self.genome_dirs:
            if not genome_dir.is_dir():
                raise FileNotFoundError(f"{genome_dir} is not a valid directory.")
        self.output = output

        self.factory = create_factory(config.sensor_type, config.sensors)
        self.classifier = location_class_for(config.class_type, config.negative)
        codon_filter = (codon_filter_for(config.class_type, config.negative)
                        if config.edge_filter else None)
        # One generator shared by chunk starts and class balancing
        self.rng = random.Random(config.sampling.seed)
        self.sampler = ChunkedRandomSampler.from_config(
            config.sampling,
            self.factory,
            self.classifier,
            codon_filter=codon_filter,
            rng=self.rng,
        )
        self.contigs_processed = 0
        self.genomes_processed = 0

    def run(self) -> Counter:
        """
        Process the genome directories to produce the output file.

        Returns:
            Rows written per class
        """
        buffer = BalancedOutputBuffer(self.output, self.config.sampling.fuzz_factor, rng=self.rng)
        buffer.write_header(format_row('expect', *self.factory.headers()))

        with buffer:
            for genome_dir in self.genome_dirs:
                logger.info(f"Processing {genome_dir}.")
                for genome_file in iter_genome_files(genome_dir):
                    try:
                        genome = read_genbank(genome_file)
                    except (OSError, ValueError) as e:
                        logger.error(f"Error processing {genome_file}: {e}")
                        continue
                    logger.info(f"Processing {genome!r}.")
                    for contig in genome.contigs:
                        self.process_contig(contig, genome.location_lists[contig.id], buffer)
                    self.genomes_processed += 1

        logger.info(
            f"{self.genomes_processed} genomes, {self.contigs_processed} contigs processed"
        )
        for reason, count in sorted(self.sampler.skip_counts.items()):
            logger.info(f"{count:>12,} positions skipped ({reason})")
        return buffer.class_counts

    def process_contig(self, contig: Contig, locations: LocationList,
                       buffer: BalancedOutputBuffer):
        """Output the training data from one contig."""
        logger.debug(
            f"Processing contig {contig.id} ({contig.length:,} bp, "
            f"{locations.coding_fraction():.1%} coding)"
        )
        for label, sensor in self.sampler.sample(contig.id, contig.sequence, locations):
            buffer.write(label, format_row(label, sensor))
        self.contigs_processed += 1


__all__ = ['ContigProcessor']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
