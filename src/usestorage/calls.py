"""Typed dispatchable calls.

Each call model validates its arguments against their native widths and
knows how to apply itself to a :class:`~usestorage.store.StateStore`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from usestorage.exceptions import UnknownCallError
from usestorage.hashing import U32_MAX, U128_MAX

if TYPE_CHECKING:
    from usestorage.store import Caller, StateStore

U32 = Annotated[int, Field(ge=0, le=U32_MAX, strict=True)]
U128 = Annotated[int, Field(ge=0, le=U128_MAX, strict=True)]


class _CallBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    CALL_INDEX: ClassVar[int]

    def apply(self, store: StateStore, caller: Caller) -> None:
        raise NotImplementedError


class SetClassInfo(_CallBase):
    CALL_INDEX: ClassVar[int] = 0

    call: Literal["set_class_info"] = "set_class_info"
    class_value: U32

    def apply(self, store: StateStore, caller: Caller) -> None:
        store.set_class_info(caller, self.class_value)


class SetStudentInfo(_CallBase):
    CALL_INDEX: ClassVar[int] = 1

    call: Literal["set_student_info"] = "set_student_info"
    student_number: U32
    student_name: U128

    def apply(self, store: StateStore, caller: Caller) -> None:
        store.set_student_info(caller, self.student_number, self.student_name)


class SetDormInfo(_CallBase):
    CALL_INDEX: ClassVar[int] = 2

    call: Literal["set_dorm_info"] = "set_dorm_info"
    dorm_number: U32
    bed_number: U32
    student_number: U32

    def apply(self, store: StateStore, caller: Caller) -> None:
        store.set_dorm_info(caller, self.dorm_number, self.bed_number, self.student_number)


Call = Annotated[SetClassInfo | SetStudentInfo | SetDormInfo, Field(discriminator="call")]

_CALL_ADAPTER: TypeAdapter[SetClassInfo | SetStudentInfo | SetDormInfo] = TypeAdapter(Call)

CALLS_BY_INDEX: dict[int, type[SetClassInfo | SetStudentInfo | SetDormInfo]] = {
    cls.CALL_INDEX: cls for cls in (SetClassInfo, SetStudentInfo, SetDormInfo)
}


def parse_call(data: Any) -> SetClassInfo | SetStudentInfo | SetDormInfo:
    """Validate a plain mapping like ``{"call": "set_class_info", "class_value": 5}``."""
    return _CALL_ADAPTER.validate_python(data)


def call_from_index(index: int, **arguments: Any) -> SetClassInfo | SetStudentInfo | SetDormInfo:
    """Build a call from its call index and keyword arguments."""
    cls = CALLS_BY_INDEX.get(index)
    if cls is None:
        raise UnknownCallError(f"no call with index {index}", call_index=index)
    return cls(**arguments)
