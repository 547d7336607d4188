"""Host-side dispatch of calls against a :class:`StateStore`.

The store raises on rejected calls; the runtime turns those errors into
:class:`DispatchResult` values so a host never has to catch them, and is
the only place where dispatch outcomes are logged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from usestorage.calls import SetClassInfo, SetDormInfo, SetStudentInfo, parse_call
from usestorage.config import RuntimeConfig
from usestorage.events import Event, EventLog
from usestorage.exceptions import DispatchError, ErrorKind
from usestorage.origin import Signed, System, Unsigned
from usestorage.storage import StorageBackend
from usestorage.store import StateStore

_logger = logging.getLogger(__name__)


class DispatchResult(BaseModel):
    """Outcome of one dispatched call."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    error: ErrorKind | None = None
    message: str = ""
    events: tuple[Event, ...] = ()


class Runtime:
    """Single-writer host around one store.

    Calls are applied one at a time in the order :meth:`dispatch` is invoked.
    """

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        *,
        storage: StorageBackend | None = None,
    ) -> None:
        self._config = config or RuntimeConfig()
        self.events = EventLog()
        self.store = StateStore(
            storage=storage,
            events=self.events,
            pallet_name=self._config.pallet_name,
        )

    @property
    def config(self) -> RuntimeConfig:
        return self._config

    def dispatch(
        self,
        origin: Signed | Unsigned | System,
        call: SetClassInfo | SetStudentInfo | SetDormInfo | Mapping[str, Any],
    ) -> DispatchResult:
        """Apply *call* on behalf of *origin*.

        Mappings are validated into call models first; a malformed mapping
        raises :class:`pydantic.ValidationError` since it never reaches the
        store.
        """
        if isinstance(call, Mapping):
            call = parse_call(dict(call))

        if self._config.dispatch_trace_enabled:
            _logger.debug("Dispatching %s origin=%s args=%s", call.call, origin.origin, call.model_dump())

        first_new = len(self.events)
        try:
            call.apply(self.store, origin)
        except DispatchError as exc:
            _logger.debug("Call %s rejected: %s (%s)", call.call, exc.kind.value, exc)
            return DispatchResult(ok=False, error=exc.kind, message=str(exc))

        emitted = tuple(record.event for record in self.events.records[first_new:])
        if self._config.dispatch_trace_enabled:
            _logger.debug("Call %s succeeded with %d event(s)", call.call, len(emitted))
        return DispatchResult(ok=True, events=emitted)
