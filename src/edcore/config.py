"""Engine configuration read from ``EDCORE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from edcore.runtime.telemetry import ENV_PREFIX

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Settings shared by the file adapter and the pattern compiler."""

    encoding: str = DEFAULT_ENCODING
    regex_cache_size: int = 0

    @classmethod
    def from_env(cls) -> "EngineConfig":
        encoding = os.getenv(f"{ENV_PREFIX}ENCODING") or DEFAULT_ENCODING
        raw_cache = os.getenv(f"{ENV_PREFIX}REGEX_CACHE")
        try:
            cache_size = int(raw_cache) if raw_cache else 0
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}REGEX_CACHE must be an integer, got {raw_cache!r}"
            ) from exc
        return cls(encoding=encoding, regex_cache_size=max(cache_size, 0))


_ACTIVE: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = EngineConfig.from_env()
    return _ACTIVE


def configure(config: Optional[EngineConfig] = None) -> EngineConfig:
    """Adopt ``config``, or re-read the environment when it is ``None``."""

    global _ACTIVE
    _ACTIVE = config or EngineConfig.from_env()
    from edcore import patterns

    patterns.reset_cache()
    return _ACTIVE


__all__ = ["EngineConfig", "configure", "get_config"]
