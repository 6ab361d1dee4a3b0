"""Custom exception hierarchy for statelocal.

Every failure raised by the library is a :class:`StateLocalError` carrying one
of the fixed messages in :data:`ERROR_MESSAGES`.  Errors signal incorrect usage
(a contract violation), never a transient condition.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, NoReturn


class ErrorKind(enum.StrEnum):
    """Identifies which validation rule was violated."""

    INITIAL_REQUIRED = "initialIsRequired"
    INITIAL_TYPE = "initialType"
    INITIAL_CONTENT = "initialContent"
    HANDLER_TYPE = "handlerType"
    HANDLERS_TYPE = "handlersType"
    SELECTOR_TYPE = "selectorType"
    CHANGE_TYPE = "changeType"
    CHANGE_FIELD = "changeField"


DEFAULT_MESSAGE = "an unknown error occurred in state-local package"

ERROR_MESSAGES: Mapping[ErrorKind, str] = {
    ErrorKind.INITIAL_REQUIRED: "initial state is required",
    ErrorKind.INITIAL_TYPE: "initial state should be an object",
    ErrorKind.INITIAL_CONTENT: "initial state shouldn't be an empty object",
    ErrorKind.HANDLER_TYPE: "handler should be an object or a function",
    ErrorKind.HANDLERS_TYPE: "all handlers should be functions",
    ErrorKind.SELECTOR_TYPE: "selector should be a function",
    ErrorKind.CHANGE_TYPE: "provided value of changes should be an object",
    ErrorKind.CHANGE_FIELD: (
        'it seems you want to change a field in the state which is not specified in the "initial" state'
    ),
}


class StateLocalError(Exception):
    """Base exception for all statelocal errors."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.context: dict[str, Any] = dict(context or {})
        super().__init__(message)


class InitialStateError(StateLocalError):
    """Initial state is missing, not a mapping, or empty."""


class HandlerError(StateLocalError):
    """Handler is neither a callable nor a mapping of callables."""


class SelectorError(StateLocalError):
    """Selector passed to ``get_state`` is not callable."""


class ChangeError(StateLocalError):
    """Change payload is not a mapping or names unknown fields."""


_ERROR_CLASSES: dict[ErrorKind, type[StateLocalError]] = {
    ErrorKind.INITIAL_REQUIRED: InitialStateError,
    ErrorKind.INITIAL_TYPE: InitialStateError,
    ErrorKind.INITIAL_CONTENT: InitialStateError,
    ErrorKind.HANDLER_TYPE: HandlerError,
    ErrorKind.HANDLERS_TYPE: HandlerError,
    ErrorKind.SELECTOR_TYPE: SelectorError,
    ErrorKind.CHANGE_TYPE: ChangeError,
    ErrorKind.CHANGE_FIELD: ChangeError,
}


def _coerce_kind(kind: ErrorKind | str) -> ErrorKind | None:
    try:
        return ErrorKind(kind)
    except ValueError:
        return None


def error_message(kind: ErrorKind | str) -> str:
    """Return the fixed message for *kind*, or :data:`DEFAULT_MESSAGE` if unknown."""
    resolved = _coerce_kind(kind)
    if resolved is None:
        return DEFAULT_MESSAGE
    return ERROR_MESSAGES.get(resolved, DEFAULT_MESSAGE)


def raise_error(kind: ErrorKind | str, **context: Any) -> NoReturn:
    """Raise the exception mapped to *kind*.

    Parameters
    ----------
    kind : ErrorKind or str
        The violated rule.  Unknown values raise a bare
        :class:`StateLocalError` with :data:`DEFAULT_MESSAGE`.
    **context
        Extra details attached to the exception as ``context``.
        They never change the message.
    """
    resolved = _coerce_kind(kind)
    error_cls = _ERROR_CLASSES.get(resolved, StateLocalError) if resolved is not None else StateLocalError
    raise error_cls(error_message(kind), kind=resolved, context=context)
