"""State container configuration."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_keys(value: str) -> frozenset[str]:
    return frozenset(part.strip() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class StateConfig:
    """Behaviour switches for a state container.

    Parameters
    ----------
    snapshot_reads : bool
        ``get_state()`` returns a shallow copy of the state.  When ``False``
        the live dict is returned and mutating it affects the container.
        Writes through the live dict bypass validation: adding or removing
        keys there breaks the fixed key set, and handlers are not notified.
    log_updates : bool
        Emit a DEBUG record with the redacted change for every update.
    redact_keys : frozenset[str]
        Additional key names (case-insensitive) masked in log records.
    max_log_string : int
        Strings longer than this are truncated in log records.
    """

    snapshot_reads: bool = True
    log_updates: bool = False
    redact_keys: frozenset[str] = frozenset()
    max_log_string: int = 512

    @classmethod
    def from_env(cls, **overrides: Any) -> StateConfig:
        """Create configuration from ``STATE_LOCAL_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "snapshot_reads" not in overrides:
            config_kwargs["snapshot_reads"] = _env_bool(env.get("STATE_LOCAL_SNAPSHOT_READS"), True)

        if "log_updates" not in overrides:
            config_kwargs["log_updates"] = _env_bool(env.get("STATE_LOCAL_LOG_UPDATES"), False)

        redact_env = env.get("STATE_LOCAL_REDACT_KEYS")
        if redact_env is not None and "redact_keys" not in overrides:
            config_kwargs["redact_keys"] = _env_keys(redact_env)

        max_string_env = env.get("STATE_LOCAL_MAX_LOG_STRING")
        if max_string_env is not None and "max_log_string" not in overrides:
            config_kwargs["max_log_string"] = int(max_string_env)

        if "redact_keys" in overrides:
            overrides["redact_keys"] = frozenset(overrides["redact_keys"])

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
