from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from cssbuilder.compose import DEFAULT_COMBINATORS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class BuilderConfig:
    log_level: str = "WARNING"
    combinators: tuple[str, ...] = DEFAULT_COMBINATORS  # tokens `build` splits on

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuilderConfig:
        """Read ``CSSBUILDER_LOG_LEVEL``; unknown level names fall back to the default."""
        env = os.environ if environ is None else environ
        level = env.get("CSSBUILDER_LOG_LEVEL", cls.log_level).strip().upper()
        if level not in LOG_LEVELS:
            level = cls.log_level
        return cls(log_level=level)
