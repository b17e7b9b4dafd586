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

import time
from typing import TYPE_CHECKING

from timewindow._window import Window

if TYPE_CHECKING:
    from timewindow._config import WindowConfig
    from timewindow._types import Clock, WindowSnapshot


class EventCounter:
    """Clock-driven event counter over the last ``size`` epochs.

    Wraps a :class:`Window` and derives epochs from ``clock`` by bucketing
    timestamps into ``resolution``-second slots. Reads advance the window
    to the present first, so ``total()`` only reflects recent events even
    when nothing has been recorded for a while.
    """

    def __init__(
        self,
        size: int,
        clock: Clock = time.time,
        resolution: float = 1.0,
        start_epoch: int | None = None,
    ) -> None:
        if resolution <= 0:
            raise ValueError(f"resolution must be > 0, got {resolution}")
        self._clock = clock
        self._resolution = resolution
        epoch0 = start_epoch if start_epoch is not None else self._epoch_of(clock())
        self._window = Window(epoch0, size)

    @classmethod
    def from_config(
        cls,
        config: WindowConfig,
        clock: Clock = time.time,
    ) -> EventCounter:
        return cls(
            size=config.size,
            clock=clock,
            resolution=config.resolution,
            start_epoch=config.start_epoch,
        )

    def _epoch_of(self, timestamp: float) -> int:
        return int(timestamp // self._resolution)

    @property
    def window(self) -> Window:
        return self._window

    @property
    def resolution(self) -> float:
        return self._resolution

    def increment(self, delta: int = 1) -> None:
        """Record ``delta`` events at the current time."""
        self._window.add(self._epoch_of(self._clock()), delta)

    def record_at(self, timestamp: float, delta: int = 1) -> None:
        """Record ``delta`` events at ``timestamp``. Too-old timestamps are dropped."""
        self._window.add(self._epoch_of(timestamp), delta)

    def total(self) -> int:
        """Events within the window ending now."""
        self._window.advance(self._epoch_of(self._clock()))
        return self._window.total()

    def epoch(self) -> int:
        return self._window.epoch()

    def snapshot(self) -> WindowSnapshot:
        """Advance to the present, then return a point-in-time view."""
        self._window.advance(self._epoch_of(self._clock()))
        return self._window.snapshot()
