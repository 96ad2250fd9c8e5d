"""
Sampling module for ContigSensors.

This module turns contigs into labelled example streams:
- Chunked random sampling of runs of positions
- Class-balanced output buffering
"""

from .chunk_sampler import SampleRun, ChunkedRandomSampler, format_row
from .balanced_writer import BufferState, BalancedOutputBuffer

__all__ = [
    "SampleRun",
    "ChunkedRandomSampler",
    "format_row",
    "BufferState",
    "BalancedOutputBuffer",
]
