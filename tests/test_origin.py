from __future__ import annotations

import pytest
from pydantic import ValidationError

from usestorage.exceptions import UnauthorizedError
from usestorage.origin import Signed, System, Unsigned, ensure_signed, is_authorized, parse_origin


def test_ensure_signed_returns_principal_unchanged() -> None:
    assert ensure_signed(Signed(principal="  alice ")) == "  alice "


@pytest.mark.parametrize("caller", [Unsigned(), System()])
def test_ensure_signed_rejects_unattributed_origins(caller: Unsigned | System) -> None:
    with pytest.raises(UnauthorizedError) as exc_info:
        ensure_signed(caller, operation="set_class_info")

    assert exc_info.value.operation == "set_class_info"
    assert caller.origin in str(exc_info.value)
    assert not is_authorized(caller)


def test_empty_principal_rejected() -> None:
    with pytest.raises(ValidationError):
        Signed(principal="   ")


def test_parse_origin_selects_variant() -> None:
    assert parse_origin({"origin": "signed", "principal": "bob"}) == Signed(principal="bob")
    assert isinstance(parse_origin({"origin": "unsigned"}), Unsigned)
    assert isinstance(parse_origin({"origin": "system"}), System)
    with pytest.raises(ValidationError):
        parse_origin({"origin": "root"})
