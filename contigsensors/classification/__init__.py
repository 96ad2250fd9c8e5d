"""
Classification module for ContigSensors.

This module labels contig positions for training:
- Frame and Boundary codes
- LocationList frame maps built from coding regions
- Location classifiers (phase, coding, edge, start, stop)
"""

from .frames import Frame, Boundary
from .location_list import CodingRegion, LocationList
from .location_class import (
    FrameLookup,
    LocationClass,
    PhaseClass,
    CodingClass,
    EdgeClass,
    StartClass,
    StopClass,
    location_class_for,
)

__all__ = [
    "Frame",
    "Boundary",
    "CodingRegion",
    "LocationList",
    "FrameLookup",
    "LocationClass",
    "PhaseClass",
    "CodingClass",
    "EdgeClass",
    "StartClass",
    "StopClass",
    "location_class_for",
]
