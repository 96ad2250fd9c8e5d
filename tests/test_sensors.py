#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Tests for contig sensors and sensor factories.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from contigsensors.config.run_config import ConfigValidationError, SensorConfig, SensorType
from contigsensors.io.genome_io import Contig
from contigsensors.sensors import (
    GENETIC_CODE_11,
    AminoAcidSensorFactory,
    ChannelSensorFactory,
    CodonNumericSensorFactory,
    CodonStringSensorFactory,
    ContigSensor,
    DirectSensorFactory,
    OneHotSensorFactory,
    create_factory,
    translate_codon,
)

CONTIG_ID = "3000.contig.1"


def widths(left, right):
    return SensorConfig(left_width=left, right_width=right)


# ═══════════════════════════════════════════════════════════════════════
#  ContigSensor
# ═══════════════════════════════════════════════════════════════════════

class TestContigSensor:
    """Sensor value object."""

    def test_meta_string(self):
        sensor = ContigSensor(CONTIG_ID, 1, (0.0, 0.3))
        assert sensor.meta == "3000.contig.1;1"

    def test_string_is_tab_delimited(self):
        factory = DirectSensorFactory(widths(0, 4))
        sensor = factory.create("ABC", 2, "ACGTTAGGTT")
        assert list(sensor.values) == [-0.6, 0.6, 0.3, 0.3, -0.3]
        assert str(sensor) == "-0.6\t0.6\t0.3\t0.3\t-0.3"

    def test_length_matches_values(self):
        sensor = ContigSensor("c", 5, ("a", "c", "g"))
        assert len(sensor) == 3

    def test_sensor_is_immutable(self):
        sensor = ContigSensor("c", 5, (1.0,))
        with pytest.raises(AttributeError):
            sensor.position = 6

    def test_codon_metadata(self):
        factory = ChannelSensorFactory(widths(1, 1))
        assert factory.create("c", 2, "aatgc").codon == "ATG"
        assert factory.create("c", 4, "aatgc").codon == "GC"


# ═══════════════════════════════════════════════════════════════════════
#  Direct encoding
# ═══════════════════════════════════════════════════════════════════════

class TestDirectSensors:
    """Single-number-per-base encoding."""

    SEQUENCE = "AACGTCCTGAAGTC"

    def test_full_width(self):
        factory = DirectSensorFactory(widths(4, 4))
        assert factory.full_width == 9
        assert factory.num_columns == 9

    def test_first_position_pads_upstream(self):
        factory = DirectSensorFactory(widths(4, 4))
        sensor = factory.create(CONTIG_ID, 1, self.SEQUENCE)

        assert sensor.contig_id == CONTIG_ID
        assert sensor.position == 1
        assert list(sensor.values) == [0.0, 0.0, 0.0, 0.0, -0.3, -0.3, -0.6, 0.6, 0.3]
        assert not sensor.suspicious

    def test_near_end_pads_downstream(self):
        factory = DirectSensorFactory(widths(4, 4))
        sensor = factory.create(CONTIG_ID, 12, self.SEQUENCE)

        assert list(sensor.values) == [0.3, 0.6, -0.3, -0.3, 0.6, 0.3, -0.6, 0.0, 0.0]

    def test_every_position_has_full_width(self):
        factory = DirectSensorFactory(widths(4, 4))
        sensors = list(factory.scan(self.SEQUENCE, contig_id=CONTIG_ID))

        assert [s.position for s in sensors] == list(range(1, len(self.SEQUENCE) + 1))
        assert all(len(s) == 9 for s in sensors)
        assert all(s.contig_id == CONTIG_ID for s in sensors)

    def test_lowercase_bases(self):
        factory = DirectSensorFactory(widths(0, 3))
        sensor = factory.create("c", 1, "acgt")
        assert list(sensor.values) == [-0.3, -0.6, 0.6, 0.3]

    def test_ambiguity_is_suspicious(self):
        factory = DirectSensorFactory(widths(4, 4))
        sensor = factory.create(CONTIG_ID, 7, "AACGTNCGGGGAAAT")

        assert sensor.suspicious
        assert sensor.values[3] == 0.0

    def test_headers(self):
        factory = DirectSensorFactory(widths(2, 1))
        assert factory.headers() == ["pos.-2", "pos.-1", "pos.0", "pos.1"]


# ═══════════════════════════════════════════════════════════════════════
#  Character encodings
# ═══════════════════════════════════════════════════════════════════════

class TestChannelSensors:
    """Base-letter encoding."""

    def test_off_contig_is_dash(self):
        factory = ChannelSensorFactory(widths(1, 1))
        sensor = factory.create("c", 1, "ACGTN")

        assert sensor.values == ('-', 'A', 'C')
        assert not sensor.suspicious

    def test_unknown_letter_becomes_x(self):
        factory = ChannelSensorFactory(widths(1, 1))
        sensor = factory.create("c", 5, "ACGTN")

        assert sensor.values == ('T', 'X', '-')
        assert sensor.suspicious

    def test_ambiguity_letters_are_kept(self):
        factory = ChannelSensorFactory(widths(0, 2))
        sensor = factory.create("c", 1, "ARY")
        assert sensor.values == ('A', 'R', 'Y')


class TestOneHotSensors:
    """Four-indicator-per-base encoding."""

    def test_headers(self):
        factory = OneHotSensorFactory(widths(1, 0))
        assert factory.headers() == [
            "pos.-1A", "pos.-1C", "pos.-1G", "pos.-1T",
            "pos.0A", "pos.0C", "pos.0G", "pos.0T",
        ]

    def test_values(self):
        factory = OneHotSensorFactory(widths(1, 0))
        sensor = factory.create("c", 1, "GT")

        assert sensor.values == (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0)
        assert len(sensor) == 8

    def test_unknown_base_is_empty_and_suspicious(self):
        factory = OneHotSensorFactory(widths(0, 0))
        sensor = factory.create("c", 1, "N")

        assert sensor.values == (0.0, 0.0, 0.0, 0.0)
        assert sensor.suspicious


class TestCodonSensors:
    """Codon-based encodings."""

    def test_codon_numeric_values(self):
        factory = CodonNumericSensorFactory(widths(0, 1))
        assert factory.create("c", 1, "ACGT").values == (0.268, 0.684)

    def test_codon_numeric_pads_with_zero(self):
        factory = CodonNumericSensorFactory(widths(0, 1))
        sensor = factory.create("c", 3, "ACGT")

        assert sensor.values == (0.84, 0.4)
        assert not sensor.suspicious

    def test_codon_numeric_unknown_base(self):
        factory = CodonNumericSensorFactory(widths(0, 0))
        sensor = factory.create("c", 1, "ANG")

        assert sensor.values == (0.208,)
        assert sensor.suspicious

    def test_codon_string_strides_by_codon(self):
        factory = CodonStringSensorFactory(widths(3, 5))
        sensor = factory.create("c", 1, "ATGCCC")

        assert factory.headers() == ["pos.-3", "pos.0", "pos.3"]
        assert sensor.values == ('---', 'atg', 'ccc')

    def test_codon_string_unknown_base(self):
        factory = CodonStringSensorFactory(widths(0, 2))
        sensor = factory.create("c", 1, "ATN")

        assert sensor.values == ('atn',)
        assert sensor.suspicious

    def test_amino_acid_translation(self):
        factory = AminoAcidSensorFactory(widths(3, 5))
        sensor = factory.create("c", 1, "ATGTAA")

        assert sensor.values == ('-', 'M', '*')
        assert not sensor.suspicious

    def test_amino_acid_partial_codon_is_dash(self):
        factory = AminoAcidSensorFactory(widths(3, 5))
        sensor = factory.create("c", 2, "ATGTAA")
        assert sensor.values == ('-', 'C', '-')

    def test_amino_acid_unknown_codon(self):
        factory = AminoAcidSensorFactory(widths(0, 2))
        sensor = factory.create("c", 4, "ATGNNN")

        assert sensor.values == ('X',)
        assert sensor.suspicious

    @pytest.mark.parametrize("sensor_type", ["codon-string", "amino-acid"])
    def test_misaligned_widths_rejected(self, sensor_type):
        with pytest.raises(ConfigValidationError):
            create_factory(sensor_type, widths(4, 4))
        with pytest.raises(ConfigValidationError):
            create_factory(sensor_type, widths(3, 3))


# ═══════════════════════════════════════════════════════════════════════
#  Factory selection and scanning
# ═══════════════════════════════════════════════════════════════════════

class TestFactorySelection:
    """create_factory and default widths."""

    @pytest.mark.parametrize("tag,columns", [
        ("direct", 66),
        ("channel", 66),
        ("codon-numeric", 66),
        ("one-hot", 264),
        ("codon-string", 22),
        ("amino-acid", 22),
    ])
    def test_default_column_counts(self, tag, columns):
        factory = create_factory(tag)
        sensor = factory.create("c", 30, "ACGT" * 30)

        assert len(sensor) == columns
        assert len(factory.headers()) == columns

    def test_every_type_has_a_factory(self):
        for sensor_type in SensorType:
            assert create_factory(sensor_type).sensor_type is sensor_type

    def test_tag_parsing_is_lenient(self):
        assert isinstance(create_factory("ONE_HOT"), OneHotSensorFactory)

    def test_unknown_tag_rejected(self):
        with pytest.raises(ConfigValidationError, match="Unknown sensor type"):
            create_factory("quaternion")


class TestSensorScan:
    """Scanning a range of positions."""

    def test_scan_skips_suspicious(self):
        factory = DirectSensorFactory(widths(4, 4))
        contig = Contig(CONTIG_ID, "AACGTNCGGGGAAAT")
        sensors = list(factory.scan(contig, start=2, length=20))

        assert sensors[0].position == 11
        assert [s.position for s in sensors] == [11, 12, 13, 14, 15]
        assert not any(s.suspicious for s in sensors)

    def test_scan_is_restartable(self):
        factory = ChannelSensorFactory(widths(2, 2))
        scan = factory.scan("ACGTACGT", contig_id="c")
        assert [s.meta for s in scan] == [s.meta for s in scan]

    def test_scan_range(self):
        factory = ChannelSensorFactory(widths(0, 0))
        sensors = list(factory.scan("ACGTACGT", start=3, length=4, contig_id="c"))
        assert [s.values[0] for s in sensors] == ['G', 'T', 'A', 'C']


# ═══════════════════════════════════════════════════════════════════════
#  Genetic code
# ═══════════════════════════════════════════════════════════════════════

class TestGeneticCode:
    """Translation table 11."""

    def test_table_is_complete(self):
        assert len(GENETIC_CODE_11) == 64

    def test_translations(self):
        assert translate_codon("ATG") == "M"
        assert translate_codon("gtg") == "V"
        assert translate_codon("TGA") == "*"
        assert translate_codon("NNN") is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            GENETIC_CODE_11["ATG"] = "X"

    def test_unsupported_table(self):
        with pytest.raises(ConfigValidationError):
            translate_codon("ATG", table_id=4)

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
