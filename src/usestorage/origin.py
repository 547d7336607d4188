"""Caller identities supplied by the host for each call.

Signature checks happen in the host before a call reaches the store; by the
time an origin is built here it is either an already-verified account
(:class:`Signed`) or one of the unattributed origins.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from usestorage.exceptions import UnauthorizedError


class Signed(BaseModel):
    """Call attributable to a specific account."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    origin: Literal["signed"] = "signed"
    principal: str = Field(..., description="Verified account identifier")

    @field_validator("principal")
    @classmethod
    def _require_principal(cls, value: str) -> str:
        # Opaque: kept exactly as the host supplied it.
        if not value.strip():
            raise ValueError("principal must be non-empty")
        return value


class Unsigned(BaseModel):
    """Call with no signer (e.g. an unsigned transaction)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    origin: Literal["unsigned"] = "unsigned"


class System(BaseModel):
    """Call originating from the host itself."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    origin: Literal["system"] = "system"


CallerIdentity = Annotated[Signed | Unsigned | System, Field(discriminator="origin")]

_CALLER_ADAPTER: TypeAdapter[Signed | Unsigned | System] = TypeAdapter(CallerIdentity)


def parse_origin(data: object) -> Signed | Unsigned | System:
    """Build a caller identity from a plain mapping such as ``{"origin": "signed", "principal": "alice"}``."""
    return _CALLER_ADAPTER.validate_python(data)


def is_authorized(caller: Signed | Unsigned | System) -> bool:
    """Only signed principals may mutate state."""
    return isinstance(caller, Signed)


def ensure_signed(caller: Signed | Unsigned | System, *, operation: str = "") -> str:
    """Return the signer of *caller* or raise :class:`UnauthorizedError`."""
    if not isinstance(caller, Signed):
        raise UnauthorizedError(
            f"{operation or 'call'} requires a signed origin, got {caller.origin}",
            operation=operation,
        )
    return caller.principal
