"""
Sensor module for ContigSensors.

This module turns DNA windows into encoded feature vectors:
- ContigSensor data holder
- Sensor factories (direct, channel, one-hot, codon-numeric, codon-string, amino-acid)
- Codon filters for marker-codon gating
- Genetic code translation
"""

from .sensor import ContigSensor
from .factories import (
    SensorFactory,
    SensorScan,
    DirectSensorFactory,
    ChannelSensorFactory,
    OneHotSensorFactory,
    CodonNumericSensorFactory,
    CodonStringSensorFactory,
    AminoAcidSensorFactory,
    create_factory,
)
from .codon_filter import CodonFilter, codon_filter_for, START_CODONS, STOP_CODONS
from .genetic_code import GENETIC_CODE_11, translate_codon

__all__ = [
    "ContigSensor",
    "SensorFactory",
    "SensorScan",
    "DirectSensorFactory",
    "ChannelSensorFactory",
    "OneHotSensorFactory",
    "CodonNumericSensorFactory",
    "CodonStringSensorFactory",
    "AminoAcidSensorFactory",
    "create_factory",
    "CodonFilter",
    "codon_filter_for",
    "START_CODONS",
    "STOP_CODONS",
    "GENETIC_CODE_11",
    "translate_codon",
]
