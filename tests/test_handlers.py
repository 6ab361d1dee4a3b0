from __future__ import annotations

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from statelocal.exceptions import HandlerError
from statelocal.handlers import FieldHandlers, GlobalHandler, NoHandler, build_handler, dispatch


def test_build_handler_classifies_input() -> None:
    callback = Mock()

    assert isinstance(build_handler(None), NoHandler)

    global_handler = build_handler(callback)
    assert isinstance(global_handler, GlobalHandler)
    assert global_handler.callback is callback

    field_handlers = build_handler({"a": callback})
    assert isinstance(field_handlers, FieldHandlers)
    assert field_handlers.callbacks == {"a": callback}


def test_build_handler_validates() -> None:
    with pytest.raises(HandlerError):
        build_handler("nope")


def test_handler_variants_are_frozen() -> None:
    handler = GlobalHandler(callback=print)

    with pytest.raises(ValidationError):
        handler.callback = len  # type: ignore[misc]


def test_dispatch_global_handler_gets_copy_of_state() -> None:
    callback = Mock()
    state = {"a": 1, "b": 2}

    dispatch(GlobalHandler(callback=callback), state, {"a": 1})

    callback.assert_called_once_with({"a": 1, "b": 2})
    assert callback.call_args.args[0] is not state


def test_dispatch_field_handlers() -> None:
    ha, hb = Mock(), Mock()

    dispatch(FieldHandlers(callbacks={"a": ha, "b": hb}), {"a": 1, "b": 2, "c": 3}, {"a": 1, "c": 3})

    ha.assert_called_once_with(1)
    hb.assert_not_called()


def test_dispatch_no_handler_is_noop() -> None:
    dispatch(NoHandler(), {"a": 1}, {"a": 1})
