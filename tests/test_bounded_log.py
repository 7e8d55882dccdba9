from __future__ import annotations

import pytest

from jarvisx.orchestrator.bounded_log import BoundedLog


def test_newest_first_with_eviction() -> None:
    log: BoundedLog[int] = BoundedLog(capacity=3)
    for value in range(5):
        log.push(value)
    assert log.snapshot() == [4, 3, 2]
    assert len(log) == 3


def test_prepend_keeps_block_order() -> None:
    log: BoundedLog[str] = BoundedLog(capacity=4)
    log.prepend(["user-1", "assistant-1"])
    log.prepend(["user-2", "assistant-2"])
    log.prepend(["user-3", "assistant-3"])
    assert list(log) == ["user-3", "assistant-3", "user-2", "assistant-2"]


def test_clear() -> None:
    log: BoundedLog[int] = BoundedLog()
    log.push(1)
    log.clear()
    assert log.snapshot() == []
    assert log.capacity == 12


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        BoundedLog(capacity=0)
