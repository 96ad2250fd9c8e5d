#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Run configuration: Immutable dataclasses for sensor widths, classification
scheme and sampling parameters.

A RunConfig is built once per run (see ``schema.build_run_config``) and passed
into every factory, classifier, sampler and output buffer.  Nothing here is
mutated after construction.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class SensorType(Enum):
    """Supported DNA sensor encodings."""
    DIRECT = "direct"
    CHANNEL = "channel"
    CODON_NUMERIC = "codon-numeric"
    CODON_STRING = "codon-string"
    ONE_HOT = "one-hot"
    AMINO_ACID = "amino-acid"

    @classmethod
    def parse(cls, tag) -> 'SensorType':
        """Resolve a type tag (enum member or string) to a SensorType."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower().replace('_', '-'))
        except ValueError:
            valid = ', '.join(t.value for t in cls)
            raise ConfigValidationError(
                f"Unknown sensor type '{tag}' (expected one of: {valid})"
            )


class LocationClassType(Enum):
    """Supported location classification schemes."""
    PHASE = "phase"
    CODING = "coding"
    EDGE = "edge"
    START = "start"
    STOP = "stop"

    @classmethod
    def parse(cls, tag) -> 'LocationClassType':
        """Resolve a type tag (enum member or string) to a LocationClassType."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            valid = ', '.join(t.value for t in cls)
            raise ConfigValidationError(
                f"Unknown classification type '{tag}' (expected one of: {valid})"
            )


@dataclass(frozen=True)
class SensorConfig:
    """
    Sensor window configuration.

    Widths are measured in output positions around the target position, so
    the full window is ``left_width + right_width + 1`` bases wide.

    Attributes:
        left_width: Number of positions sensed upstream of the target
        right_width: Number of positions sensed downstream of the target
    """
    left_width: int = 21
    right_width: int = 44

    def __post_init__(self):
        """Validate window widths."""
        for name in ('left_width', 'right_width'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigValidationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigValidationError(f"{name} must be non-negative, got {value}")

    @property
    def full_width(self) -> int:
        """Number of bases spanned by a sensor window."""
        return self.left_width + self.right_width + 1

    def check_stride(self, stride: int):
        """
        Verify the widths align to codon boundaries for the given stride.

        Raises:
            ConfigValidationError: If the widths do not fit the stride
        """
        if stride <= 1:
            return
        if self.left_width % stride != 0:
            raise ConfigValidationError(
                f"left_width must be a multiple of {stride}, got {self.left_width}"
            )
        if self.right_width % stride != stride - 1:
            raise ConfigValidationError(
                f"right_width must be {stride - 1} more than a multiple of {stride}, "
                f"got {self.right_width}"
            )


@dataclass(frozen=True)
class SamplingConfig:
    """
    Chunked sampling and output balancing parameters.

    Attributes:
        chunk_size: Contig section size; one run is attempted per section
        run_length: Maximum accepted positions per run
        fuzz_factor: 0 to stream output, else class-balance ratio in [1.0, 2.0]
        seed: Random seed for reproducibility (None = random)
    """
    chunk_size: int = 50000
    run_length: int = 200
    fuzz_factor: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate sampling parameters."""
        if self.chunk_size < 1:
            raise ConfigValidationError(f"chunk_size must be at least 1, got {self.chunk_size}")
        if self.run_length < 1:
            raise ConfigValidationError(f"run_length must be at least 1, got {self.run_length}")
        check_fuzz_factor(self.fuzz_factor)


def check_fuzz_factor(fuzz_factor: float):
    """Reject a fuzz factor that is neither 0 nor in [1.0, 2.0]."""
    if fuzz_factor != 0 and not 1.0 <= fuzz_factor <= 2.0:
        raise ConfigValidationError(
            f"fuzz_factor must be 0 or between 1.0 and 2.0, got {fuzz_factor}"
        )


@dataclass(frozen=True)
class RunConfig:
    """Complete configuration for one run."""
    sensor_type: SensorType = SensorType.CHANNEL
    class_type: LocationClassType = LocationClassType.EDGE
    negative: bool = False
    edge_filter: bool = True
    sensors: SensorConfig = field(default_factory=SensorConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)


__all__ = [
    'ConfigValidationError',
    'SensorType',
    'LocationClassType',
    'SensorConfig',
    'SamplingConfig',
    'RunConfig',
    'check_fuzz_factor',
]

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
