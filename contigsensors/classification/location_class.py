#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Location classifiers: Turn a contig position into a training label.

A classifier is constructed with the minus-strand policy and then bound to
one contig's frame lookup.  ``class_of`` returns None for a position whose
frame is invalid; callers skip such positions.

Schemes:
    phase   the frame string ('0', '+1'..'+3', '-1'..'-3')
    coding  'coding' or 'space'
    edge    'start', 'stop' or 'other' (plus strand only)
    start   'start' or 'other'
    stop    'stop' or 'other'

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Protocol, Type, Union

from ..config.run_config import ConfigValidationError, LocationClassType
from .frames import Boundary, Frame

logger = logging.getLogger(__name__)


class FrameLookup(Protocol):
    """Per-contig frame and edge lookup consumed by the classifiers."""

    def frame_at(self, position: int) -> Frame:
        ...

    def boundary_at(self, position: int, negative: bool = False) -> Boundary:
        ...


class LocationClass(ABC):
    """
    Base class for location classifiers.

    Args:
        negative: If True, minus-strand proteins are considered coding regions
    """

    class_type: LocationClassType = None

    def __init__(self, negative: bool = False):
        self.negative = negative
        self._lookup: Optional[FrameLookup] = None

    def bind(self, lookup: FrameLookup) -> 'LocationClass':
        """Attach the frame lookup of the contig about to be classified."""
        self._lookup = lookup
        return self

    @property
    def lookup(self) -> FrameLookup:
        if self._lookup is None:
            raise RuntimeError(
                f"{self.__class__.__name__} is not bound to a frame lookup"
            )
        return self._lookup

    def normalize(self, frame: Frame) -> Frame:
        """Apply the minus-strand policy: returns the original frame or F0."""
        if not self.negative and frame.negative:
            return Frame.F0
        return frame

    @abstractmethod
    def class_of(self, position: int) -> Optional[str]:
        """Return the label of a 1-based position, or None if it is invalid."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(negative={self.negative})"


class PhaseClass(LocationClass):
    """Classification is the actual coding frame string."""

    class_type = LocationClassType.PHASE

    def class_of(self, position: int) -> Optional[str]:
        frame = self.lookup.frame_at(position)
        if frame is Frame.XX:
            return None
        return str(self.normalize(frame))


class CodingClass(LocationClass):
    """Classification is "coding" or "space"."""

    class_type = LocationClassType.CODING

    def class_of(self, position: int) -> Optional[str]:
        frame = self.normalize(self.lookup.frame_at(position))
        if frame is Frame.XX:
            return None
        return "space" if frame is Frame.F0 else "coding"


class EdgeClass(LocationClass):
    """
    Classification is "start", "stop" or "other".

    Edges are read from the boundary lookup; only plus-strand coding edges
    are supported.  The three labels train one model on forward windows,
    where a start edge reads ATG/GTG/TTG and a stop edge reads TAA/TAG/TGA.
    Minus-strand edges would put reverse-complement codons under the same
    labels, so they are left to the one-edge Start and Stop schemes.
    """

    class_type = LocationClassType.EDGE

    def __init__(self, negative: bool = False):
        if negative:
            raise ConfigValidationError(
                "Edge classification does not support minus-strand coding regions"
            )
        super().__init__(negative)

    def class_of(self, position: int) -> Optional[str]:
        return str(self.lookup.boundary_at(position, self.negative))


class StartClass(LocationClass):
    """Classification is "start" or "other"."""

    class_type = LocationClassType.START

    def class_of(self, position: int) -> Optional[str]:
        edge = self.lookup.boundary_at(position, self.negative)
        return "start" if edge is Boundary.START else "other"


class StopClass(LocationClass):
    """Classification is "stop" or "other"."""

    class_type = LocationClassType.STOP

    def class_of(self, position: int) -> Optional[str]:
        edge = self.lookup.boundary_at(position, self.negative)
        return "stop" if edge is Boundary.STOP else "other"


_SCHEMES: Dict[LocationClassType, Type[LocationClass]] = {
    LocationClassType.PHASE: PhaseClass,
    LocationClassType.CODING: CodingClass,
    LocationClassType.EDGE: EdgeClass,
    LocationClassType.START: StartClass,
    LocationClassType.STOP: StopClass,
}


def location_class_for(class_type: Union[LocationClassType, str],
                       negative: bool = False) -> LocationClass:
    """
    Create the location classifier for a scheme.

    Raises:
        ConfigValidationError: For an unknown scheme or an unsupported
            minus-strand combination
    """
    class_type = LocationClassType.parse(class_type)
    scheme = _SCHEMES[class_type](negative)
    logger.debug(f"Created {scheme!r}")
    return scheme


__all__ = [
    'FrameLookup',
    'LocationClass',
    'PhaseClass',
    'CodingClass',
    'EdgeClass',
    'StartClass',
    'StopClass',
    'location_class_for',
]

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
