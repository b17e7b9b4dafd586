# Copyright (c) 2026 Pointmatic
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timewindow._exceptions import InvalidWindowSize
from timewindow._types import WindowSnapshot

if TYPE_CHECKING:
    from timewindow._config import WindowConfig

_log = logging.getLogger("timewindow")


class Window:
    """Sliding window of event counts over integer epochs.

    Counts live in a fixed ring of ``size`` slots, one per epoch. The head
    slot holds the current epoch and the tail slot, directly after it, is
    the next one evicted when the window moves forward. A running total is
    kept in step with the ring so ``total()`` never has to sum it.

    Epochs are usually Unix seconds, but any monotonically increasing
    integer works. Updates for epochs that have already left the window are
    silently discarded.

    Not safe for concurrent use; callers sharing a window across threads
    must lock around it.
    """

    __slots__ = ("_counts", "_epoch", "_head", "_tail", "_total")

    def __init__(self, epoch0: int, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidWindowSize(size)
        self._counts: list[int] = [0] * size
        self._epoch = epoch0
        self._head = 0
        self._tail = 1 % size
        self._total = 0

    @classmethod
    def from_config(cls, config: WindowConfig) -> Window:
        """Build a window from a :class:`WindowConfig`. A missing start epoch means 0."""
        epoch0 = config.start_epoch if config.start_epoch is not None else 0
        return cls(epoch0, config.size)

    @property
    def capacity(self) -> int:
        return len(self._counts)

    def add(self, epoch: int, delta: int = 1) -> None:
        """Add ``delta`` to the counter for ``epoch``, sliding the window if needed."""
        if epoch == self._epoch:
            self._total += delta
            self._counts[self._head] += delta
            return

        if epoch > self._epoch:
            self._slide(epoch - self._epoch)
            self._epoch = epoch
            self._total += delta
            self._counts[self._head] += delta
            return

        back = self._epoch - epoch
        if back >= len(self._counts):
            _log.debug(
                "Discarded late update: epoch %d is %d behind %d (capacity %d)",
                epoch, back, self._epoch, len(self._counts),
            )
            return

        self._total += delta
        self._counts[(self._head - back) % len(self._counts)] += delta

    def advance(self, epoch: int) -> None:
        """Slide the window to ``epoch`` and expire old slots without recording."""
        self.add(epoch, 0)

    def _slide(self, steps: int) -> None:
        """Move head and tail forward ``steps`` slots, zeroing what they pass."""
        size = len(self._counts)
        if steps >= size:
            # Every slot leaves the window.
            _log.debug("Full reset: advanced %d epochs past capacity %d", steps, size)
            for i in range(size):
                self._counts[i] = 0
            self._total = 0
            self._head = (self._head + steps) % size
            self._tail = (self._head + 1) % size
            return

        for _ in range(steps):
            self._total -= self._counts[self._tail]
            self._counts[self._tail] = 0
            self._tail = (self._tail + 1) % size
        self._head = (self._head + steps) % size

    def total(self) -> int:
        """Sum of all counts inside the window."""
        return self._total

    def epoch(self) -> int:
        """Most recent epoch for which data has been recorded."""
        return self._epoch

    def count_at(self, epoch: int) -> int:
        """Count recorded for a single epoch, or 0 if it is outside the window."""
        back = self._epoch - epoch
        if back < 0 or back >= len(self._counts):
            return 0
        return self._counts[(self._head - back) % len(self._counts)]

    def counts(self) -> list[int]:
        """Per-epoch counts, oldest first. The last element is the current epoch."""
        return self._counts[self._tail:] + self._counts[: self._tail]

    def clear(self) -> None:
        """Zero every slot. The current epoch is kept."""
        for i in range(len(self._counts)):
            self._counts[i] = 0
        self._total = 0

    def snapshot(self) -> WindowSnapshot:
        return WindowSnapshot(
            epoch=self._epoch,
            capacity=len(self._counts),
            total=self._total,
            counts=tuple(self.counts()),
        )

    def __repr__(self) -> str:
        return (
            f"Window(epoch={self._epoch}, capacity={len(self._counts)}, "
            f"total={self._total})"
        )
