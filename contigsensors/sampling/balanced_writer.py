#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Class-balanced output buffer.

With a fuzz factor of 0 every row streams straight to the sink.  Otherwise
rows are held per label until ``close()``, when each label is cut down to at
most ``ceil(fuzz_factor * smallest_label_size)`` rows by a seeded uniform
subsample (original row order kept) and written out.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import math
import random
from collections import Counter
from enum import Enum
from typing import Dict, List, Optional, TextIO

from ..config.run_config import check_fuzz_factor

logger = logging.getLogger(__name__)


class BufferState(Enum):
    """Lifecycle of a BalancedOutputBuffer."""
    ACCUMULATING = "accumulating"
    FLUSHING = "flushing"
    CLOSED = "closed"


class BalancedOutputBuffer:
    """
    Write labelled rows, optionally balancing class sizes.

    Args:
        sink: Text stream receiving the output
        fuzz_factor: 0 to stream, else a ratio in [1.0, 2.0]
        rng: Random generator for the subsample (seed it for reproducibility)
    """

    def __init__(self, sink: TextIO, fuzz_factor: float = 0.0,
                 rng: Optional[random.Random] = None):
        check_fuzz_factor(fuzz_factor)
        self.sink = sink
        self.fuzz_factor = fuzz_factor
        self.rng = rng if rng is not None else random.Random()
        self.state = BufferState.ACCUMULATING
        self._buckets: Dict[str, List[str]] = {}
        # Rows received and rows emitted, per label
        self.written_counts: Counter = Counter()
        self.class_counts: Counter = Counter()

    @property
    def buffering(self) -> bool:
        return self.fuzz_factor > 0

    def write_header(self, header: str):
        """Write the header row immediately; headers are never buffered."""
        if self.state is BufferState.CLOSED:
            raise RuntimeError("Cannot write to a closed output buffer")
        self.sink.write(header + '\n')

    def write(self, label: str, row: str):
        """
        Queue or emit a formatted row for a label.

        Raises:
            RuntimeError: If the buffer is no longer accumulating
        """
        if self.state is not BufferState.ACCUMULATING:
            raise RuntimeError(f"Cannot write to an output buffer that is {self.state.value}")
        self.written_counts[label] += 1
        if self.buffering:
            self._buckets.setdefault(label, []).append(row)
        else:
            self._emit(label, row)

    def class_cap(self) -> Optional[int]:
        """Maximum rows per label at flush time, or None if nothing is buffered."""
        sizes = [len(rows) for rows in self._buckets.values() if rows]
        if not sizes:
            return None
        return math.ceil(self.fuzz_factor * min(sizes))

    def close(self):
        """Flush buffered rows (balanced) and release them.  Idempotent."""
        if self.state is BufferState.CLOSED:
            return
        self.state = BufferState.FLUSHING
        try:
            cap = self.class_cap()
            if cap is not None:
                logger.info(f"Balancing output: at most {cap} rows per class")
                for label, rows in self._buckets.items():
                    for row in self._reduce(rows, cap):
                        self._emit(label, row)
            self.sink.flush()
        finally:
            self._buckets.clear()
            self.state = BufferState.CLOSED
        for label, count in sorted(self.class_counts.items()):
            logger.info(f"{count:>12,} written of type {label}")

    def _reduce(self, rows: List[str], cap: int) -> List[str]:
        if len(rows) <= cap:
            return rows
        keep = sorted(self.rng.sample(range(len(rows)), cap))
        return [rows[i] for i in keep]

    def _emit(self, label: str, row: str):
        self.sink.write(row + '\n')
        self.class_counts[label] += 1

    def __enter__(self) -> 'BalancedOutputBuffer':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


__all__ = ['BufferState', 'BalancedOutputBuffer']

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
