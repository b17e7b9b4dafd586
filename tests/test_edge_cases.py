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

import pytest

import timewindow
from timewindow import InvalidWindowSize, TimeWindowError, Window


class TestInvalidSize:
    @pytest.mark.parametrize("size", [0, -1, -100])
    def test_non_positive_rejected(self, size: int) -> None:
        with pytest.raises(InvalidWindowSize) as exc_info:
            Window(0, size)
        assert exc_info.value.size == size

    @pytest.mark.parametrize("size", [2.5, "10", None, True])
    def test_non_int_rejected(self, size: object) -> None:
        with pytest.raises(InvalidWindowSize):
            Window(0, size)  # type: ignore[arg-type]

    def test_hierarchy(self) -> None:
        err = InvalidWindowSize(0)
        assert isinstance(err, TimeWindowError)
        assert isinstance(err, ValueError)
        assert str(err) == "size must be an int >= 1, got 0"


class TestCapacityOne:
    def test_only_current_epoch_counts(self) -> None:
        w = Window(0, 1)
        w.add(0, 3)
        assert w.total() == 3
        w.add(1, 1)
        assert w.total() == 1
        assert w.counts() == [1]

    def test_any_late_update_discarded(self) -> None:
        w = Window(5, 1)
        w.add(4, 10)
        assert w.total() == 0
        assert w.epoch() == 5


class TestEpochMonotonicity:
    def test_late_update_never_rolls_back(self) -> None:
        w = Window(100, 10)
        w.add(105, 1)
        for epoch in (104, 99, 0, -10**9):
            w.add(epoch, 1)
            assert w.epoch() == 105

    def test_negative_epochs(self) -> None:
        w = Window(-10, 4)
        w.add(-10, 1)
        w.add(-8, 1)
        w.add(-12, 1)
        assert w.total() == 2
        w.advance(-6)
        assert w.total() == 1


class TestFullReset:
    def test_reset_is_equivalent_to_fresh_window(self) -> None:
        w = Window(0, 6)
        for e in range(0, 20, 3):
            w.add(e, e)
        w.add(100, 2)
        w.add(97, 5)

        fresh = Window(100, 6)
        fresh.add(100, 2)
        fresh.add(97, 5)

        assert w.total() == fresh.total()
        assert w.counts() == fresh.counts()

    def test_reset_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="timewindow")
        w = Window(0, 3)
        w.add(0, 1)
        w.advance(3)
        assert "Full reset" in caplog.text

    def test_partial_advance_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="timewindow")
        w = Window(0, 3)
        w.advance(2)
        assert caplog.records == []


class TestPublicApi:
    def test_exports(self) -> None:
        for name in timewindow.__all__:
            assert hasattr(timewindow, name)
