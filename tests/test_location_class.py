#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Tests for location classification schemes.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from contigsensors.classification import (
    Boundary,
    CodingClass,
    EdgeClass,
    Frame,
    PhaseClass,
    StartClass,
    StopClass,
    location_class_for,
)
from contigsensors.config.run_config import ConfigValidationError, LocationClassType


class FixedLookup:
    """Frame lookup answering the same frame everywhere, with chosen edges."""

    def __init__(self, frame=Frame.F0, plus_edges=None, minus_edges=None):
        self.frame = frame
        self.plus_edges = plus_edges or {}
        self.minus_edges = minus_edges or {}

    def frame_at(self, position):
        return self.frame

    def boundary_at(self, position, negative=False):
        edge = self.plus_edges.get(position)
        if edge is None and negative:
            edge = self.minus_edges.get(position)
        return edge or Boundary.OTHER


def classify(scheme, frame, position=1):
    return scheme.bind(FixedLookup(frame)).class_of(position)


ALL_FRAMES = [Frame.M2, Frame.M1, Frame.M0, Frame.F0, Frame.P2, Frame.P1, Frame.P0, Frame.XX]


class TestNormalize:
    """Minus-strand policy."""

    def test_negative_keeps_every_frame(self):
        scheme = location_class_for(LocationClassType.CODING, negative=True)
        for frame in ALL_FRAMES:
            assert scheme.normalize(frame) is frame

    def test_positive_folds_minus_frames(self):
        scheme = location_class_for(LocationClassType.CODING, negative=False)
        expected = {
            Frame.M2: Frame.F0, Frame.M1: Frame.F0, Frame.M0: Frame.F0,
            Frame.F0: Frame.F0, Frame.P2: Frame.P2, Frame.P1: Frame.P1,
            Frame.P0: Frame.P0, Frame.XX: Frame.XX,
        }
        for frame, normal in expected.items():
            assert scheme.normalize(frame) is normal


class TestCodingClass:
    """coding / space labels."""

    def test_negative(self):
        scheme = CodingClass(negative=True)
        expected = {
            Frame.M2: "coding", Frame.M1: "coding", Frame.M0: "coding",
            Frame.F0: "space", Frame.P2: "coding", Frame.P1: "coding",
            Frame.P0: "coding", Frame.XX: None,
        }
        for frame, label in expected.items():
            assert classify(scheme, frame) == label

    def test_positive(self):
        scheme = CodingClass(negative=False)
        expected = {
            Frame.M2: "space", Frame.M1: "space", Frame.M0: "space",
            Frame.F0: "space", Frame.P2: "coding", Frame.P1: "coding",
            Frame.P0: "coding", Frame.XX: None,
        }
        for frame, label in expected.items():
            assert classify(scheme, frame) == label


class TestPhaseClass:
    """Frame-string labels."""

    def test_negative(self):
        scheme = PhaseClass(negative=True)
        expected = {
            Frame.M2: "-3", Frame.M1: "-2", Frame.M0: "-1", Frame.F0: "0",
            Frame.P2: "+3", Frame.P1: "+2", Frame.P0: "+1", Frame.XX: None,
        }
        for frame, label in expected.items():
            assert classify(scheme, frame) == label

    def test_positive(self):
        scheme = PhaseClass(negative=False)
        expected = {
            Frame.M2: "0", Frame.M1: "0", Frame.M0: "0", Frame.F0: "0",
            Frame.P2: "+3", Frame.P1: "+2", Frame.P0: "+1", Frame.XX: None,
        }
        for frame, label in expected.items():
            assert classify(scheme, frame) == label


class TestEdgeClasses:
    """start / stop / other labels from the boundary lookup."""

    LOOKUP = FixedLookup(
        Frame.P0,
        plus_edges={11: Boundary.START, 47: Boundary.STOP},
        minus_edges={97: Boundary.START, 61: Boundary.STOP},
    )

    def test_edge_rejects_negative(self):
        with pytest.raises(ConfigValidationError):
            location_class_for(LocationClassType.EDGE, negative=True)
        with pytest.raises(ConfigValidationError):
            EdgeClass(negative=True)

    def test_edge_labels(self):
        scheme = EdgeClass().bind(self.LOOKUP)

        assert scheme.class_of(11) == "start"
        assert scheme.class_of(47) == "stop"
        assert scheme.class_of(12) == "other"
        assert scheme.class_of(97) == "other"
        assert scheme.class_of(61) == "other"

    def test_start_class(self):
        plus_only = StartClass().bind(self.LOOKUP)
        both = StartClass(negative=True).bind(self.LOOKUP)

        assert plus_only.class_of(11) == "start"
        assert plus_only.class_of(47) == "other"
        assert plus_only.class_of(97) == "other"
        assert both.class_of(97) == "start"
        assert both.class_of(61) == "other"

    def test_stop_class(self):
        plus_only = StopClass().bind(self.LOOKUP)
        both = StopClass(negative=True).bind(self.LOOKUP)

        assert plus_only.class_of(47) == "stop"
        assert plus_only.class_of(11) == "other"
        assert plus_only.class_of(61) == "other"
        assert both.class_of(61) == "stop"


class TestSchemeSelection:
    """location_class_for and binding."""

    @pytest.mark.parametrize("tag,cls", [
        ("phase", PhaseClass),
        ("coding", CodingClass),
        ("edge", EdgeClass),
        ("start", StartClass),
        ("stop", StopClass),
    ])
    def test_selection_by_tag(self, tag, cls):
        scheme = location_class_for(tag)
        assert isinstance(scheme, cls)
        assert scheme.class_type is LocationClassType(tag)

    def test_unknown_scheme(self):
        with pytest.raises(ConfigValidationError, match="Unknown classification type"):
            location_class_for("exon")

    def test_unbound_classifier(self):
        with pytest.raises(RuntimeError):
            PhaseClass().class_of(1)

    def test_bind_returns_classifier(self):
        scheme = PhaseClass()
        assert scheme.bind(FixedLookup()) is scheme

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
