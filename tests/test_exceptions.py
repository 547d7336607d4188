from __future__ import annotations

import pytest

from usestorage.exceptions import (
    DispatchError,
    DuplicateKeyError,
    ErrorKind,
    StorageOverflowError,
    UnauthorizedError,
)


def test_dispatch_error_base_cannot_be_raised_directly() -> None:
    with pytest.raises(TypeError):
        DispatchError("rejected")


@pytest.mark.parametrize(
    ("error_cls", "kind"),
    [
        (UnauthorizedError, ErrorKind.UNAUTHORIZED),
        (DuplicateKeyError, ErrorKind.DUPLICATE_KEY),
        (StorageOverflowError, ErrorKind.STORAGE_OVERFLOW),
    ],
)
def test_subclasses_default_message_to_their_kind(error_cls: type[DispatchError], kind: ErrorKind) -> None:
    exc = error_cls(operation="set_class_info")

    assert exc.kind is kind
    assert str(exc) == kind.value
    assert exc.operation == "set_class_info"
