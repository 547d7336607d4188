"""usestorage - permissioned key/value state module for class, student and dorm records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("usestorage")
except PackageNotFoundError:
    __version__ = "0+local"
from usestorage.calls import Call, SetClassInfo, SetDormInfo, SetStudentInfo, call_from_index, parse_call
from usestorage.config import RuntimeConfig
from usestorage.events import EventLog, EventRecord, EventSink, ValueStored
from usestorage.exceptions import (
    DispatchError,
    DuplicateKeyError,
    ErrorKind,
    StorageOverflowError,
    UnauthorizedError,
    UnknownCallError,
    UseStorageConfigError,
    UseStorageError,
)
from usestorage.origin import CallerIdentity, Signed, System, Unsigned, ensure_signed, is_authorized, parse_origin
from usestorage.runtime import DispatchResult, Runtime
from usestorage.storage import InMemoryStorage, StorageBackend
from usestorage.store import StateStore

__all__ = [
    "__version__",
    "Call",
    "CallerIdentity",
    "DispatchError",
    "DispatchResult",
    "DuplicateKeyError",
    "ErrorKind",
    "EventLog",
    "EventRecord",
    "EventSink",
    "InMemoryStorage",
    "Runtime",
    "RuntimeConfig",
    "SetClassInfo",
    "SetDormInfo",
    "SetStudentInfo",
    "Signed",
    "StateStore",
    "StorageBackend",
    "StorageOverflowError",
    "System",
    "UnauthorizedError",
    "UnknownCallError",
    "Unsigned",
    "UseStorageConfigError",
    "UseStorageError",
    "ValueStored",
    "call_from_index",
    "ensure_signed",
    "is_authorized",
    "parse_call",
    "parse_origin",
]
