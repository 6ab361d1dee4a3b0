"""Validation predicates and assertions.

Validators never mutate their inputs.  On violation they raise through
:func:`statelocal.exceptions.raise_error`; the first failing check wins.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from statelocal.exceptions import ErrorKind, raise_error


def is_object(value: Any) -> bool:
    """Return ``True`` when *value* is a mapping (a "plain object")."""
    return isinstance(value, Mapping)


def is_empty(value: Mapping[str, Any]) -> bool:
    return not len(value)


def is_callable(value: Any) -> bool:
    return callable(value)


def validate_initial(initial: Any) -> None:
    """Check that *initial* is present (not ``None`` or falsy), a mapping, and has at least one key.

    An empty mapping counts as present and fails the content check instead.
    """
    if initial is None or (not is_object(initial) and not initial):
        raise_error(ErrorKind.INITIAL_REQUIRED)
    if not is_object(initial):
        raise_error(ErrorKind.INITIAL_TYPE)
    if is_empty(initial):
        raise_error(ErrorKind.INITIAL_CONTENT)


def validate_handler(handler: Any) -> None:
    """Check that *handler* is a callable or a mapping whose values are all callable."""
    if not (is_callable(handler) or is_object(handler)):
        raise_error(ErrorKind.HANDLER_TYPE)
    if is_object(handler) and not all(is_callable(callback) for callback in handler.values()):
        raise_error(ErrorKind.HANDLERS_TYPE)


def validate_selector(selector: Any) -> None:
    if not is_callable(selector):
        raise_error(ErrorKind.SELECTOR_TYPE)


def validate_changes(initial_keys: Collection[str], changes: Any) -> Mapping[str, Any]:
    """Check a resolved change payload against the fixed key set.

    Returns *changes* unchanged so callers can validate and bind in one step.
    """
    if not is_object(changes):
        raise_error(ErrorKind.CHANGE_TYPE)
    unknown = [field for field in changes if field not in initial_keys]
    if unknown:
        raise_error(ErrorKind.CHANGE_FIELD, fields=sorted(map(str, unknown)))
    return changes
