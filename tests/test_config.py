from __future__ import annotations

import pytest

from usestorage.config import RuntimeConfig
from usestorage.exceptions import UseStorageConfigError


def test_defaults() -> None:
    config = RuntimeConfig()

    assert config.pallet_name == "UseStorage"
    assert config.dispatch_trace_enabled is False


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USESTORAGE_PALLET_NAME", " Campus ")
    monkeypatch.setenv("USESTORAGE_DISPATCH_TRACE_ENABLED", "yes")

    config = RuntimeConfig.from_env()

    assert config.pallet_name == "Campus"
    assert config.dispatch_trace_enabled is True


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USESTORAGE_DISPATCH_TRACE_ENABLED", "1")

    config = RuntimeConfig.from_env(dispatch_trace_enabled=False)

    assert config.dispatch_trace_enabled is False


def test_unparseable_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USESTORAGE_DISPATCH_TRACE_ENABLED", "maybe")

    assert RuntimeConfig.from_env().dispatch_trace_enabled is False


def test_empty_pallet_name_rejected() -> None:
    with pytest.raises(UseStorageConfigError):
        RuntimeConfig(pallet_name="  ")
