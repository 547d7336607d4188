from __future__ import annotations

import pytest
from pydantic import ValidationError

from usestorage.events import EventLog, EventRecord, ValueStored
from usestorage.hashing import U32_MAX


def test_event_log_assigns_contiguous_indices() -> None:
    log = EventLog()

    log.deposit(ValueStored(class_value=1, caller="alice"))
    log.deposit(ValueStored(class_value=2, caller="bob"))

    assert [record.index for record in log.records] == [0, 1]
    assert log.records[0] == EventRecord(index=0, event=ValueStored(class_value=1, caller="alice"))
    assert log.last() == ValueStored(class_value=2, caller="bob")


def test_event_log_clear() -> None:
    log = EventLog()
    log.deposit(ValueStored(class_value=1, caller="alice"))

    log.clear()

    assert len(log) == 0
    assert log.last() is None
    assert log.events() == []


def test_value_stored_is_immutable_and_width_checked() -> None:
    event = ValueStored(class_value=U32_MAX, caller="alice")

    with pytest.raises(ValidationError):
        event.class_value = 1  # type: ignore[misc]
    with pytest.raises(ValidationError):
        ValueStored(class_value=U32_MAX + 1, caller="alice")
