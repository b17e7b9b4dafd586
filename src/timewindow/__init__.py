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

"""Sliding-window event counts over integer epochs."""

from __future__ import annotations

from timewindow._config import WindowConfig
from timewindow._counter import EventCounter
from timewindow._exceptions import InvalidWindowSize, TimeWindowError
from timewindow._types import Clock, WindowSnapshot
from timewindow._window import Window

__all__ = [
    "Clock",
    "EventCounter",
    "InvalidWindowSize",
    "TimeWindowError",
    "Window",
    "WindowConfig",
    "WindowSnapshot",
]
