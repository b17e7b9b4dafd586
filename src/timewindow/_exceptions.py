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

from typing import Any


class TimeWindowError(Exception):
    """Base exception for all timewindow errors."""


class InvalidWindowSize(TimeWindowError, ValueError):  # noqa: N818
    """Raised when a window is sized with anything but a positive int."""

    def __init__(self, size: Any) -> None:
        self.size = size
        super().__init__(f"size must be an int >= 1, got {size!r}")
