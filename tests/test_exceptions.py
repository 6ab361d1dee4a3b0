from __future__ import annotations

import pytest

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
    raise_error,
)


def test_every_kind_has_a_message() -> None:
    assert set(ERROR_MESSAGES) == set(ErrorKind)


def test_error_message_accepts_string_values() -> None:
    assert error_message("selectorType") == "selector should be a function"
    assert error_message(ErrorKind.INITIAL_REQUIRED) == "initial state is required"


def test_error_message_falls_back_to_default() -> None:
    assert error_message("somethingElse") == DEFAULT_MESSAGE


@pytest.mark.parametrize(
    ("kind", "error_cls"),
    [
        (ErrorKind.INITIAL_REQUIRED, InitialStateError),
        (ErrorKind.INITIAL_TYPE, InitialStateError),
        (ErrorKind.INITIAL_CONTENT, InitialStateError),
        (ErrorKind.HANDLER_TYPE, HandlerError),
        (ErrorKind.HANDLERS_TYPE, HandlerError),
        (ErrorKind.SELECTOR_TYPE, SelectorError),
        (ErrorKind.CHANGE_TYPE, ChangeError),
        (ErrorKind.CHANGE_FIELD, ChangeError),
    ],
)
def test_raise_error_maps_kind_to_class(kind: ErrorKind, error_cls: type[StateLocalError]) -> None:
    with pytest.raises(error_cls) as exc_info:
        raise_error(kind)

    assert str(exc_info.value) == ERROR_MESSAGES[kind]
    assert exc_info.value.kind is kind


def test_raise_error_unknown_kind_uses_base_class() -> None:
    with pytest.raises(StateLocalError) as exc_info:
        raise_error("somethingElse")

    assert type(exc_info.value) is StateLocalError
    assert str(exc_info.value) == DEFAULT_MESSAGE
    assert exc_info.value.kind is None


def test_raise_error_context_does_not_change_message() -> None:
    with pytest.raises(ChangeError) as exc_info:
        raise_error(ErrorKind.CHANGE_FIELD, fields=["z"])

    assert str(exc_info.value) == ERROR_MESSAGES[ErrorKind.CHANGE_FIELD]
    assert exc_info.value.context == {"fields": ["z"]}
