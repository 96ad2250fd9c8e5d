#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Sensor factories: Convert the DNA window around a contig position into a
ContigSensor.

Each factory encodes a window that begins ``left_width`` positions upstream
of the target and steps by the factory's stride for one output column at a
time.  Positions off either end of the contig take the factory's neutral
symbol; unrecognised letters take its ambiguity symbol and mark the sensor
suspicious.

Variants:
    direct          one float per base
    channel         the base letter itself
    one-hot         four floats per base
    codon-numeric   one float per base encoding the codon starting there
    codon-string    one lowercase codon per stride-3 step
    amino-acid      one translated amino acid per stride-3 step

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple, Type, Union

from ..config.run_config import ConfigValidationError, SensorConfig, SensorType
from ..utils.sequence_utils import extract_codon
from .genetic_code import translate_codon
from .sensor import ContigSensor, SensorValue

logger = logging.getLogger(__name__)

Encoding = Tuple[List[SensorValue], bool]


# ============================================================================
#                         ENCODING TABLES
# ============================================================================

DIRECT_VALUES = {'A': -0.3, 'C': -0.6, 'G': 0.6, 'T': 0.3, 'U': 0.3}

CHANNEL_LETTERS = frozenset('ACGTU-XYRWSKM' + 'acgtu-xyrwskm')

ONE_HOT_VALUES = {
    'A': (1.0, 0.0, 0.0, 0.0),
    'C': (0.0, 1.0, 0.0, 0.0),
    'G': (0.0, 0.0, 1.0, 0.0),
    'T': (0.0, 0.0, 0.0, 1.0),
    'U': (0.0, 0.0, 0.0, 1.0),
}
ONE_HOT_EMPTY = (0.0, 0.0, 0.0, 0.0)
ONE_HOT_CHANNELS = 'ACGT'

CODON_DIGITS = {'A': '2', 'C': '6', 'G': '8', 'T': '4', 'U': '4'}

CODON_LETTERS = {'A': 'a', 'C': 'c', 'G': 'g', 'T': 't', 'U': 't'}


# ============================================================================
#                         FACTORY BASE
# ============================================================================

class SensorFactory(ABC):
    """
    Base class for sensor factories.

    Args:
        config: Window widths; must be codon-aligned for stride-3 factories
    """

    sensor_type: SensorType = None
    stride: int = 1

    def __init__(self, config: Optional[SensorConfig] = None):
        self.config = config if config is not None else SensorConfig()
        self.config.check_stride(self.stride)

    @property
    def left_width(self) -> int:
        return self.config.left_width

    @property
    def right_width(self) -> int:
        return self.config.right_width

    @property
    def full_width(self) -> int:
        return self.config.full_width

    def offsets(self) -> range:
        """Window offsets (relative to the target) of each output column."""
        return range(-self.left_width, self.right_width + 1, self.stride)

    @property
    def num_columns(self) -> int:
        """Number of window steps encoded per sensor."""
        return len(self.offsets())

    def headers(self) -> List[str]:
        """Column names of the encoded values, in output order."""
        return [f"pos.{i}" for i in self.offsets()]

    def create(self, contig_id: str, position: int, sequence: str) -> ContigSensor:
        """
        Create the sensor for a 1-based position in a DNA sequence.

        Args:
            contig_id: ID of the DNA sequence
            position: 1-based position of the target base
            sequence: DNA sequence from which the sensor is derived
        """
        start = position - 1 - self.left_width
        values, suspicious = self._encode(sequence, start)
        return ContigSensor(
            contig_id=contig_id,
            position=position,
            values=tuple(values),
            suspicious=suspicious,
            codon=extract_codon(sequence, position),
        )

    @abstractmethod
    def _encode(self, sequence: str, start: int) -> Encoding:
        """
        Encode the window beginning at a 0-based offset.

        Returns:
            (values, suspicious)
        """

    def scan(self, source, start: int = 1, length: Optional[int] = None,
             contig_id: Optional[str] = None) -> 'SensorScan':
        """
        Sensors for a range of positions, excluding suspicious ones.

        Args:
            source: A contig (anything with ``id`` and ``sequence``) or a raw
                DNA string
            start: First 1-based position
            length: Number of positions (None = to the end of the sequence)
            contig_id: ID to use when ``source`` is a raw string

        Returns:
            Restartable iterable of ContigSensor
        """
        if isinstance(source, str):
            sequence = source
            seq_id = contig_id or ''
        else:
            sequence = source.sequence
            seq_id = contig_id or source.id
        return SensorScan(self, seq_id, sequence, start, length)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(left_width={self.left_width}, "
                f"right_width={self.right_width})")


class SensorScan:
    """Lazy, restartable run of non-suspicious sensors over a position range."""

    def __init__(self, factory: SensorFactory, contig_id: str, sequence: str,
                 start: int = 1, length: Optional[int] = None):
        self.factory = factory
        self.contig_id = contig_id
        self.sequence = sequence
        self.start = max(start, 1)
        end = len(sequence) if length is None else start + length - 1
        self.end = min(end, len(sequence))

    def __iter__(self) -> Iterator[ContigSensor]:
        for pos in range(self.start, self.end + 1):
            sensor = self.factory.create(self.contig_id, pos, self.sequence)
            if not sensor.suspicious:
                yield sensor


# ============================================================================
#                         SINGLE-BASE FACTORIES
# ============================================================================

class DirectSensorFactory(SensorFactory):
    """Each base converts to a single number; off-contig and ambiguous bases are 0.0."""

    sensor_type = SensorType.DIRECT

    def _encode(self, sequence: str, start: int) -> Encoding:
        values = []
        suspicious = False
        seq_len = len(sequence)
        for p in range(start, start + self.full_width):
            if p < 0 or p >= seq_len:
                values.append(0.0)
                continue
            value = DIRECT_VALUES.get(sequence[p].upper())
            if value is None:
                value = 0.0
                suspicious = True
            values.append(value)
        return values, suspicious


class ChannelSensorFactory(SensorFactory):
    """Each base converts to its own letter, for one-hot expansion by the model."""

    sensor_type = SensorType.CHANNEL

    def _encode(self, sequence: str, start: int) -> Encoding:
        values = []
        suspicious = False
        seq_len = len(sequence)
        for p in range(start, start + self.full_width):
            if p < 0 or p >= seq_len:
                values.append('-')
                continue
            letter = sequence[p]
            if letter not in CHANNEL_LETTERS:
                letter = 'X'
                suspicious = True
            values.append(letter)
        return values, suspicious


class OneHotSensorFactory(SensorFactory):
    """Each base converts to four indicator values (A, C, G, T)."""

    sensor_type = SensorType.ONE_HOT

    def headers(self) -> List[str]:
        return [f"pos.{i}{base}" for i in self.offsets() for base in ONE_HOT_CHANNELS]

    def _encode(self, sequence: str, start: int) -> Encoding:
        values = []
        suspicious = False
        seq_len = len(sequence)
        for p in range(start, start + self.full_width):
            chosen = ONE_HOT_EMPTY
            if 0 <= p < seq_len:
                chosen = ONE_HOT_VALUES.get(sequence[p].upper())
                if chosen is None:
                    chosen = ONE_HOT_EMPTY
                    suspicious = True
            values.extend(chosen)
        return values, suspicious


class CodonNumericSensorFactory(SensorFactory):
    """
    Each base converts to a number computed from the codon beginning there.

    The value is ``0.d1d2d3`` with A=2, C=6, G=8, T/U=4 per base, so the
    window still advances one base per column.
    """

    sensor_type = SensorType.CODON_NUMERIC

    def _encode(self, sequence: str, start: int) -> Encoding:
        values = []
        suspicious = False
        seq_len = len(sequence)
        for p in range(start, start + self.full_width):
            digits = []
            for j in range(p, p + 3):
                if j < 0 or j >= seq_len:
                    digits.append('0')
                    continue
                digit = CODON_DIGITS.get(sequence[j].upper())
                if digit is None:
                    digit = '0'
                    suspicious = True
                digits.append(digit)
            values.append(float('0.' + ''.join(digits)))
        return values, suspicious


# ============================================================================
#                         CODON-STRIDE FACTORIES
# ============================================================================

class CodonStringSensorFactory(SensorFactory):
    """Each codon converts to its lowercase letters; off-contig bases are '-'."""

    sensor_type = SensorType.CODON_STRING
    stride = 3

    def _encode(self, sequence: str, start: int) -> Encoding:
        values = []
        suspicious = False
        seq_len = len(sequence)
        offset = start
        for _ in range(self.num_columns):
            letters = []
            for j in range(offset, offset + 3):
                if j < 0 or j >= seq_len:
                    letters.append('-')
                    continue
                letter = CODON_LETTERS.get(sequence[j].upper())
                if letter is None:
                    letter = 'n'
                    suspicious = True
                letters.append(letter)
            values.append(''.join(letters))
            offset += self.stride
        return values, suspicious


class AminoAcidSensorFactory(SensorFactory):
    """
    Each codon converts to its amino acid under genetic code 11.

    A codon that runs off the contig is '-'; one that cannot be translated
    is 'X' and marks the sensor suspicious.
    """

    sensor_type = SensorType.AMINO_ACID
    stride = 3

    def __init__(self, config: Optional[SensorConfig] = None, genetic_code: int = 11):
        super().__init__(config)
        # Fail at construction on an unsupported table
        translate_codon('ATG', genetic_code)
        self.genetic_code = genetic_code

    def _encode(self, sequence: str, start: int) -> Encoding:
        values = []
        suspicious = False
        seq_len = len(sequence)
        offset = start
        for _ in range(self.num_columns):
            aa = '-'
            end = offset + 3
            if offset >= 0 and end <= seq_len:
                aa = translate_codon(sequence[offset:end], self.genetic_code)
                if aa is None:
                    aa = 'X'
                    suspicious = True
            values.append(aa)
            offset += self.stride
        return values, suspicious


# ============================================================================
#                         FACTORY SELECTION
# ============================================================================

_FACTORIES: Dict[SensorType, Type[SensorFactory]] = {
    SensorType.DIRECT: DirectSensorFactory,
    SensorType.CHANNEL: ChannelSensorFactory,
    SensorType.ONE_HOT: OneHotSensorFactory,
    SensorType.CODON_NUMERIC: CodonNumericSensorFactory,
    SensorType.CODON_STRING: CodonStringSensorFactory,
    SensorType.AMINO_ACID: AminoAcidSensorFactory,
}


def create_factory(sensor_type: Union[SensorType, str],
                   config: Optional[SensorConfig] = None) -> SensorFactory:
    """
    Create a sensor factory of the specified type.

    Args:
        sensor_type: SensorType or its tag (e.g. 'one-hot')
        config: Window widths

    Raises:
        ConfigValidationError: For an unknown type or misaligned widths
    """
    sensor_type = SensorType.parse(sensor_type)
    factory_class = _FACTORIES.get(sensor_type)
    if factory_class is None:
        raise ConfigValidationError(f"Unknown contig factory type {sensor_type}.")
    factory = factory_class(config)
    logger.debug(f"Created {factory!r}")
    return factory


__all__ = [
    'SensorFactory',
    'SensorScan',
    'DirectSensorFactory',
    'ChannelSensorFactory',
    'OneHotSensorFactory',
    'CodonNumericSensorFactory',
    'CodonStringSensorFactory',
    'AminoAcidSensorFactory',
    'create_factory',
]

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
