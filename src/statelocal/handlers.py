"""Change-notification handlers.

User input for the ``handler`` argument is either a single callable or a
mapping of field names to callables.  It is classified once, at construction,
into one of three frozen variants and dispatched by variant afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from statelocal.validators import is_object, validate_handler


class NoHandler(BaseModel):
    """No notification is sent after updates."""

    model_config = ConfigDict(frozen=True)


class GlobalHandler(BaseModel):
    """Invoked with the complete post-update state after every update."""

    model_config = ConfigDict(frozen=True)

    callback: Callable[[dict[str, Any]], Any]


class FieldHandlers(BaseModel):
    """Per-field callbacks, invoked with only the field's new value."""

    model_config = ConfigDict(frozen=True)

    callbacks: dict[Any, Callable[[Any], Any]] = Field(default_factory=dict)


Handler = NoHandler | GlobalHandler | FieldHandlers


def build_handler(handler: Any) -> Handler:
    """Validate raw *handler* input and classify it."""
    if handler is None:
        return NoHandler()
    validate_handler(handler)
    if is_object(handler):
        return FieldHandlers(callbacks=dict(handler))
    return GlobalHandler(callback=handler)


def dispatch(handler: Handler, state: Mapping[str, Any], change: Mapping[str, Any]) -> None:
    """Notify *handler* about an applied *change*.

    Callback exceptions propagate; callbacks after the failing one are skipped.
    """
    if isinstance(handler, GlobalHandler):
        handler.callback(dict(state))
    elif isinstance(handler, FieldHandlers):
        for field, value in change.items():
            callback = handler.callbacks.get(field)
            if callback is not None:
                callback(value)
