"""Runtime configuration for usestorage."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from usestorage.exceptions import UseStorageConfigError
from usestorage.store import DEFAULT_PALLET_NAME


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RuntimeConfig:
    """Host runtime configuration.

    Parameters
    ----------
    pallet_name : str
        Prefix qualifying every storage key of the store.
    dispatch_trace_enabled : bool
        Log every dispatched call and its outcome at DEBUG level.
        Rejected calls are logged regardless.
    """

    pallet_name: str = DEFAULT_PALLET_NAME
    dispatch_trace_enabled: bool = False

    def __post_init__(self) -> None:
        if not self.pallet_name or not self.pallet_name.strip():
            raise UseStorageConfigError("pallet_name must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> RuntimeConfig:
        """Create configuration from ``USESTORAGE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        pallet_name = env.get("USESTORAGE_PALLET_NAME")
        if pallet_name is not None:
            config_kwargs["pallet_name"] = pallet_name.strip()

        config_kwargs["dispatch_trace_enabled"] = _env_bool(
            env.get("USESTORAGE_DISPATCH_TRACE_ENABLED"),
            False,
        )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
