#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Prediction-input generation: Encode every position of FASTA sequences.

The first column is the location metadata, the second the codon at the
position (also metadata), and the remaining columns are sensors.  No labels
are produced.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Union

from ..config.run_config import LocationClassType, SensorConfig, SensorType
from ..io.genome_io import Contig, read_fasta
from ..sampling.chunk_sampler import format_row
from ..sensors.codon_filter import codon_filter_for
from ..sensors.factories import create_factory
from ..sensors.sensor import ContigSensor

logger = logging.getLogger(__name__)


class FastaProcessor:
    """
    Encode FASTA sequences for model prediction.

    Args:
        sensor_type: Sensor encoding
        sensor_config: Window widths
        fasta_files: FASTA files to process
        output: Text stream receiving the rows
        edge_filter: Only output positions starting a known edge codon
        skip_ambiguous: Leave out sensors that contain ambiguity characters
    """

    def __init__(
        self,
        sensor_type: Union[SensorType, str],
        sensor_config: SensorConfig,
        fasta_files: Sequence[Union[str, Path]],
        output: TextIO,
        edge_filter: bool = False,
        skip_ambiguous: bool = False
    ):
        self.factory = create_factory(sensor_type, sensor_config)
        self.fasta_files: List[Path] = [Path(f) for f in fasta_files]
        for fasta_file in self.fasta_files:
            if not fasta_file.exists():
                raise FileNotFoundError(f"{fasta_file} does not exist.")
        self.output = output
        self.codon_filter = codon_filter_for(LocationClassType.EDGE) if edge_filter else None
        self.skip_ambiguous = skip_ambiguous
        self.rows_written = 0

    def run(self) -> int:
        """
        Write the header and one row per output position.

        Returns:
            Number of data rows written
        """
        self.output.write(format_row('location', 'codon', *self.factory.headers()) + '\n')
        for fasta_file in self.fasta_files:
            logger.info(f"Processing file {fasta_file}.")
            try:
                for contig in read_fasta(fasta_file):
                    self._write_sensors(self.sensors_for(contig))
            except (OSError, ValueError) as e:
                logger.error(f"Error processing {fasta_file}: {e}")
        self.output.flush()
        logger.info(f"{self.rows_written:,} rows written")
        return self.rows_written

    def sensors_for(self, contig: Contig) -> Iterable[ContigSensor]:
        """Sensors to output for one sequence, in position order."""
        if self.codon_filter is None and self.skip_ambiguous:
            return self.factory.scan(contig)
        return self._filtered_sensors(contig)

    def _filtered_sensors(self, contig: Contig) -> Iterator[ContigSensor]:
        sequence = contig.sequence
        for pos in range(1, contig.length + 1):
            if self.codon_filter is not None and not self.codon_filter.matches(pos, sequence):
                continue
            sensor = self.factory.create(contig.id, pos, sequence)
            if self.skip_ambiguous and sensor.suspicious:
                continue
            yield sensor

    def _write_sensors(self, sensors: Iterable[ContigSensor]):
        for sensor in sensors:
            self.output.write(format_row(sensor.meta, sensor.codon or '-', sensor) + '\n')
            self.rows_written += 1


__all__ = ['FastaProcessor']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
