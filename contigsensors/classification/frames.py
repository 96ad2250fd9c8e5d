"""
ContigSensors v0.1.0

Reading-frame and coding-boundary codes for contig positions.
"""

from enum import Enum


class Frame(Enum):
    """
    Coding frame of a single base.

    Values are the canonical label strings: '0' outside coding regions,
    '+1'/'+2'/'+3' for the codon positions of a plus-strand protein,
    '-1'/'-2'/'-3' for a minus-strand protein, 'X' for an invalid or
    ambiguous position.
    """
    F0 = "0"
    P0 = "+1"
    P1 = "+2"
    P2 = "+3"
    M0 = "-1"
    M1 = "-2"
    M2 = "-3"
    XX = "X"

    @property
    def negative(self) -> bool:
        """True for a minus-strand codon position."""
        return self in (Frame.M0, Frame.M1, Frame.M2)

    @property
    def coding(self) -> bool:
        return self not in (Frame.F0, Frame.XX)

    @property
    def code(self) -> int:
        return _FRAME_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> 'Frame':
        return _CODE_FRAMES[int(code)]

    def __str__(self) -> str:
        return self.value


class Boundary(Enum):
    """Coding-region edge classification of a single base."""
    START = "start"
    STOP = "stop"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


# Compact integer codes for per-position frame arrays
_FRAME_CODES = {
    Frame.F0: 0,
    Frame.P0: 1,
    Frame.P1: 2,
    Frame.P2: 3,
    Frame.M0: 4,
    Frame.M1: 5,
    Frame.M2: 6,
    Frame.XX: 7,
}
_CODE_FRAMES = {code: frame for frame, code in _FRAME_CODES.items()}

PLUS_FRAMES = (Frame.P0, Frame.P1, Frame.P2)
MINUS_FRAMES = (Frame.M0, Frame.M1, Frame.M2)


__all__ = ['Frame', 'Boundary', 'PLUS_FRAMES', 'MINUS_FRAMES']
