"""Permissioned state store.

This is the only component allowed to mutate the class value, the student
registry and the dormitory assignments. Every operation checks all of its
preconditions before writing, so a rejected call leaves storage and the
event sink exactly as they were.
"""

from __future__ import annotations

from usestorage.events import EventLog, EventSink, ValueStored
from usestorage.exceptions import DuplicateKeyError
from usestorage.hashing import U32_MAX, U32_WIDTH, U128_MAX, U128_WIDTH, check_width
from usestorage.origin import Signed, System, Unsigned, ensure_signed
from usestorage.storage import InMemoryStorage, StorageBackend, StorageDoubleMap, StorageMap, StorageValue

#: Default module prefix for storage keys.
DEFAULT_PALLET_NAME = "UseStorage"

CLASS_ITEM = "Class"
STUDENT_INFO_ITEM = "StudentInfo"
DORM_INFO_ITEM = "DormInfo"

Caller = Signed | Unsigned | System


class StateStore:
    """Owner of the ``Class``, ``StudentInfo`` and ``DormInfo`` collections.

    Parameters
    ----------
    storage : StorageBackend or None
        Host storage. A fresh :class:`InMemoryStorage` is used when omitted.
    events : EventSink or None
        Host event sink. A fresh :class:`EventLog` is used when omitted.
    pallet_name : str
        Prefix that qualifies every storage key of this store.
    """

    def __init__(
        self,
        *,
        storage: StorageBackend | None = None,
        events: EventSink | None = None,
        pallet_name: str = DEFAULT_PALLET_NAME,
    ) -> None:
        self.storage: StorageBackend = storage if storage is not None else InMemoryStorage()
        self.events: EventSink = events if events is not None else EventLog()
        self.pallet_name = pallet_name
        self._class = StorageValue(self.storage, pallet_name, CLASS_ITEM, width=U32_WIDTH)
        self._student_info = StorageMap(
            self.storage,
            pallet_name,
            STUDENT_INFO_ITEM,
            key_width=U32_WIDTH,
            value_width=U128_WIDTH,
        )
        self._dorm_info = StorageDoubleMap(
            self.storage,
            pallet_name,
            DORM_INFO_ITEM,
            key1_width=U32_WIDTH,
            key2_width=U32_WIDTH,
            value_width=U32_WIDTH,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_class_info(self, caller: Caller, class_value: int) -> None:
        """Overwrite the class value and emit :class:`ValueStored`."""
        principal = ensure_signed(caller, operation="set_class_info")
        check_width("class_value", class_value, U32_MAX)

        self._class.put(class_value)
        self.events.deposit(ValueStored(class_value=class_value, caller=principal))

    def set_student_info(self, caller: Caller, student_number: int, student_name: int) -> None:
        """Register a student number once.

        Raises
        ------
        UnauthorizedError
            If *caller* is not signed.
        DuplicateKeyError
            If *student_number* is already registered.
        """
        ensure_signed(caller, operation="set_student_info")
        check_width("student_number", student_number, U32_MAX)
        check_width("student_name", student_name, U128_MAX)

        if self._student_info.contains(student_number):
            raise DuplicateKeyError(
                f"student {student_number} is already registered",
                operation="set_student_info",
                key=student_number,
            )
        # No event here; only set_class_info reports through the sink.
        self._student_info.insert(student_number, student_name)

    def set_dorm_info(self, caller: Caller, dorm_number: int, bed_number: int, student_number: int) -> None:
        """Assign a bed, replacing any previous occupant.

        The student number is not checked against the student registry.
        """
        ensure_signed(caller, operation="set_dorm_info")
        check_width("dorm_number", dorm_number, U32_MAX)
        check_width("bed_number", bed_number, U32_MAX)
        check_width("student_number", student_number, U32_MAX)

        self._dorm_info.insert(dorm_number, bed_number, student_number)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def class_value(self) -> int | None:
        return self._class.get()

    def student_info(self, student_number: int) -> int:
        """Stored name for *student_number*, or ``0`` when unregistered."""
        value = self._student_info.get(student_number)
        return 0 if value is None else value

    def has_student(self, student_number: int) -> bool:
        return self._student_info.contains(student_number)

    def students(self) -> dict[int, int]:
        return dict(self._student_info.items())

    def dorm_info(self, dorm_number: int, bed_number: int) -> int:
        """Student assigned to the bed, or ``0`` when unassigned."""
        value = self._dorm_info.get(dorm_number, bed_number)
        return 0 if value is None else value

    def has_dorm_assignment(self, dorm_number: int, bed_number: int) -> bool:
        return self._dorm_info.contains(dorm_number, bed_number)

    def dorm_assignments(self) -> dict[tuple[int, int], int]:
        return dict(self._dorm_info.items())
