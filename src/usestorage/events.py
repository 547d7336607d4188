"""Events emitted by successful state transitions.

The store deposits events into whatever sink the host provides;
:class:`EventLog` is the in-memory sink used by default.
"""

from __future__ import annotations

from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

from usestorage.hashing import U32_MAX


class ValueStored(BaseModel):
    """A signed caller set a new class value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    event: Literal["ValueStored"] = "ValueStored"
    class_value: int = Field(..., ge=0, le=U32_MAX, description="The new value set")
    caller: str = Field(..., description="The account that set the value")


# Only one event kind exists today; widen to a discriminated union when more are added.
Event = ValueStored


class EventSink(Protocol):
    """Protocol for host-provided event delivery."""

    def deposit(self, event: Event) -> None: ...


class EventRecord(BaseModel):
    """An event together with its position in the log."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    event: Event


class EventLog:
    """Append-only in-memory event sink.

    Records are kept in deposit order; indices are contiguous from 0.
    """

    def __init__(self) -> None:
        self._records: list[EventRecord] = []

    def deposit(self, event: Event) -> None:
        self._records.append(EventRecord(index=len(self._records), event=event))

    @property
    def records(self) -> tuple[EventRecord, ...]:
        return tuple(self._records)

    def events(self) -> list[Event]:
        return [record.event for record in self._records]

    def last(self) -> Event | None:
        if not self._records:
            return None
        return self._records[-1].event

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
