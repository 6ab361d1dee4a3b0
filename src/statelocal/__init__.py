"""statelocal - Minimal framework-agnostic local state container."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("state-local")
except PackageNotFoundError:
    __version__ = "0+local"
from statelocal.config import StateConfig
from statelocal.exceptions import (
    DEFAULT_MESSAGE,
    ERROR_MESSAGES,
    ChangeError,
    ErrorKind,
    HandlerError,
    InitialStateError,
    SelectorError,
    StateLocalError,
    error_message,
)
from statelocal.handlers import FieldHandlers, GlobalHandler, NoHandler
from statelocal.store import LocalState, create_state

__all__ = [
    "__version__",
    "DEFAULT_MESSAGE",
    "ERROR_MESSAGES",
    "ChangeError",
    "ErrorKind",
    "FieldHandlers",
    "GlobalHandler",
    "HandlerError",
    "InitialStateError",
    "LocalState",
    "NoHandler",
    "SelectorError",
    "StateConfig",
    "StateLocalError",
    "create_state",
    "error_message",
]
