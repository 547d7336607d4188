from __future__ import annotations

import pytest
from pydantic import ValidationError

from usestorage.calls import SetClassInfo, SetDormInfo, SetStudentInfo, call_from_index, parse_call
from usestorage.exceptions import UnknownCallError
from usestorage.hashing import U32_MAX


def test_call_indices() -> None:
    assert SetClassInfo.CALL_INDEX == 0
    assert SetStudentInfo.CALL_INDEX == 1
    assert SetDormInfo.CALL_INDEX == 2


def test_call_from_index_builds_matching_model() -> None:
    call = call_from_index(2, dorm_number=3, bed_number=1, student_number=7)

    assert call == SetDormInfo(dorm_number=3, bed_number=1, student_number=7)


def test_call_from_unknown_index_raises() -> None:
    with pytest.raises(UnknownCallError) as exc_info:
        call_from_index(3, class_value=1)

    assert exc_info.value.call_index == 3


def test_parse_call_uses_discriminator() -> None:
    call = parse_call({"call": "set_student_info", "student_number": 7, "student_name": 42})

    assert isinstance(call, SetStudentInfo)
    assert call.student_name == 42


@pytest.mark.parametrize(
    "data",
    [
        {"call": "set_class_info", "class_value": U32_MAX + 1},
        {"call": "set_class_info", "class_value": -1},
        {"call": "set_class_info", "class_value": "5"},
        {"call": "set_dorm_info", "dorm_number": 1, "bed_number": 1},
        {"call": "kill_storage"},
    ],
)
def test_parse_call_rejects_malformed_calls(data: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        parse_call(data)
