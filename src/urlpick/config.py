"""
Runtime configuration.

Values come from URLPICK_* environment variables; the CLI overrides them with
its options via Config.replace().
"""
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Mapping

APP_NAME: str = "urlpick"
VERSION: str = "0.1.0"

ENV_DEBOUNCE_MS: str = "URLPICK_DEBOUNCE_MS"
ENV_QUIT_CHAR: str = "URLPICK_QUIT_CHAR"
ENV_LOG_FILE: str = "URLPICK_LOG_FILE"
ENV_LOG_LEVEL: str = "URLPICK_LOG_LEVEL"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    debounce_ms: int = 200
    quit_char: str = "q"
    cancel_values: tuple[str, ...] = ("Cancel", "Exit")
    log_file: str | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.debounce_ms <= 0:
            raise ValueError(f"debounce_ms must be positive, got {self.debounce_ms}")
        if len(self.quit_char) != 1:
            raise ValueError(f"quit_char must be a single character, got {self.quit_char!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def debounce_interval(self) -> float:
        """Debounce interval in seconds."""
        return self.debounce_ms / 1000.0

    def replace(self, **changes: object) -> Config:
        """Copy with the given fields changed; ``None`` values are skipped."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        raw = env.get(ENV_DEBOUNCE_MS)
        if raw:
            try:
                kwargs["debounce_ms"] = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_DEBOUNCE_MS} must be an integer, got {raw!r}") from None

        if env.get(ENV_QUIT_CHAR):
            kwargs["quit_char"] = env[ENV_QUIT_CHAR]
        if env.get(ENV_LOG_FILE):
            kwargs["log_file"] = env[ENV_LOG_FILE]
        if env.get(ENV_LOG_LEVEL):
            kwargs["log_level"] = env[ENV_LOG_LEVEL].upper()

        return cls(**kwargs)  # type: ignore[arg-type]
