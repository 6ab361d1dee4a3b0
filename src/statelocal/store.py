"""Local state container.

A :class:`LocalState` exclusively owns one state dict whose key set is fixed at
construction.  :func:`create_state` hands out its bound ``get_state`` and
``set_state`` methods as the public accessor/mutator pair.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from statelocal._redact import redact_for_log
from statelocal.config import StateConfig
from statelocal.exceptions import ErrorKind, raise_error
from statelocal.handlers import Handler, build_handler, dispatch
from statelocal.validators import (
    is_callable,
    is_object,
    validate_changes,
    validate_initial,
    validate_selector,
)

_logger = logging.getLogger(__name__)

_UNSET: Any = object()

State = dict[str, Any]
Change = Mapping[str, Any] | Callable[[State], Mapping[str, Any]]
GetState = Callable[..., Any]
SetState = Callable[[Change], None]


class LocalState:
    """Container for a single state mapping.

    Updates are shallow: each key named in a change has its value replaced
    wholesale, other keys keep their values.  Selectors, handlers and (by
    default) ``get_state()`` callers receive shallow copies, never the live
    dict.
    """

    def __init__(
        self,
        initial: Mapping[str, Any],
        handler: Any = None,
        *,
        config: StateConfig | None = None,
    ) -> None:
        validate_initial(initial)
        self._handler: Handler = build_handler(handler)
        self._config = config or StateConfig()
        self._state: State = dict(initial)
        self._keys: frozenset[str] = frozenset(self._state)

    @property
    def keys(self) -> frozenset[str]:
        """The fixed set of valid field names."""
        return self._keys

    @property
    def handler(self) -> Handler:
        return self._handler

    def _redacted(self, value: Any) -> Any:
        return redact_for_log(
            value,
            extra_keys=self._config.redact_keys,
            max_string=self._config.max_log_string,
        )

    def get_state(self, selector: Callable[[State], Any] = _UNSET) -> Any:
        """Return the current state, or ``selector(state)`` when a selector is given."""
        if selector is _UNSET:
            return dict(self._state) if self._config.snapshot_reads else self._state
        validate_selector(selector)
        return selector(dict(self._state))

    def set_state(self, change: Change) -> None:
        """Merge *change* into the state and notify the handler.

        *change* is a mapping of field names to new values, or a callable that
        receives the current state and returns such a mapping.  Any validation
        failure leaves the state untouched and notifies nobody.
        """
        if not (is_object(change) or is_callable(change)):
            raise_error(ErrorKind.CHANGE_TYPE)

        resolved = change if is_object(change) else change(dict(self._state))  # type: ignore[operator]
        resolved = dict(validate_changes(self._keys, resolved))

        if self._config.log_updates:
            _logger.debug("Applying state change: %s", self._redacted(resolved))

        self._state.update(resolved)
        dispatch(self._handler, self._state, resolved)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._redacted(self._state)!r})"


def create_state(
    initial: Any = None,
    handler: Callable[[State], Any] | Mapping[str, Callable[[Any], Any]] | None = None,
    *,
    config: StateConfig | None = None,
) -> tuple[GetState, SetState]:
    """Create a state container and return its ``(get_state, set_state)`` pair.

    Parameters
    ----------
    initial : Mapping[str, Any]
        Non-empty mapping.  Its keys are the only keys ``set_state`` accepts
        for the lifetime of the container.
    handler : callable or Mapping[str, callable], optional
        A callable receives the full state after every update.  A mapping of
        field names to callables notifies each callable with only its field's
        new value, and only when that field was part of the update.
    config : StateConfig, optional
        Behaviour switches; defaults to ``StateConfig()``.

    Returns
    -------
    tuple
        ``(get_state, set_state)``.

    Raises
    ------
    InitialStateError
        *initial* is missing, not a mapping, or empty.
    HandlerError
        *handler* is neither a callable nor a mapping of callables.
    """
    container = LocalState(initial, handler, config=config)
    _logger.debug("Created local state with fields %s", sorted(map(str, container.keys)))
    return container.get_state, container.set_state
