"""Runtime configuration for the collection service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from core.domain.sequence_ops import DUPLICATE_POLICIES, DuplicatePolicy

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when configuration values are invalid."""


def normalise_log_level(raw: str) -> str:
    """Return the upper-cased level name, rejecting names logging does not know."""
    level = str(raw).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {raw}")
    return level


@dataclass(frozen=True)
class CollectionConfig:
    """Settings applied by :class:`CollectionService`.

    ``log_level`` is ``None`` unless a level is named explicitly; the shared
    logger then keeps whatever ``LOG_LEVEL`` configured at import.
    """

    on_duplicate: DuplicatePolicy = "last"
    strict_flatten: bool = False
    log_level: str | None = None

    def __post_init__(self) -> None:
        if self.on_duplicate not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {self.on_duplicate!r}"
            )
        if self.log_level is not None:
            object.__setattr__(self, "log_level", normalise_log_level(self.log_level))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CollectionConfig":
        """Build a config from ``COLLECTIONS_*`` and ``LOG_LEVEL`` variables."""
        env = os.environ if environ is None else environ
        return cls(
            on_duplicate=env.get("COLLECTIONS_ON_DUPLICATE", "last").lower(),
            strict_flatten=_parse_bool(env.get("COLLECTIONS_STRICT_FLATTEN", "false")),
            log_level=env.get("LOG_LEVEL") or None,
        )


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"Cannot interpret {raw!r} as a boolean")
