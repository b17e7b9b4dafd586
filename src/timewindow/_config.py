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

import os
from dataclasses import dataclass
from typing import Any

from timewindow._exceptions import InvalidWindowSize


@dataclass(frozen=True)
class WindowConfig:
    """Window configuration with validation."""

    size: int = 60
    start_epoch: int | None = None
    resolution: float = 1.0

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise InvalidWindowSize(self.size)
        if self.resolution <= 0:
            raise ValueError(f"resolution must be > 0, got {self.resolution}")

    @staticmethod
    def from_dict(data: dict[str, Any]) -> WindowConfig:
        """Build config from a plain dict. Unknown keys are ignored."""
        kwargs: dict[str, Any] = {}
        if "size" in data:
            kwargs["size"] = int(data["size"])
        if data.get("start_epoch") is not None:
            kwargs["start_epoch"] = int(data["start_epoch"])
        if "resolution" in data:
            kwargs["resolution"] = float(data["resolution"])
        return WindowConfig(**kwargs)

    @staticmethod
    def from_env(prefix: str = "TIMEWINDOW") -> WindowConfig:
        """Build config from ``<PREFIX>_SIZE``, ``_START_EPOCH`` and ``_RESOLUTION`` env vars."""
        kwargs: dict[str, Any] = {}

        size = os.environ.get(f"{prefix}_SIZE")
        if size is not None:
            kwargs["size"] = int(size)

        start_epoch = os.environ.get(f"{prefix}_START_EPOCH")
        if start_epoch is not None:
            kwargs["start_epoch"] = int(start_epoch)

        resolution = os.environ.get(f"{prefix}_RESOLUTION")
        if resolution is not None:
            kwargs["resolution"] = float(resolution)

        return WindowConfig(**kwargs)
