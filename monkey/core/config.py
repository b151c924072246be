"""Global configuration for Monkey.

Holds the REPL and logging defaults. Settings can be overridden via
environment variables or explicit configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

REPL_MODES = ("tokens", "parse")


@dataclass
class MonkeyConfig:
    """Top-level configuration for Monkey."""

    # REPL
    prompt: str = ">> "
    exit_commands: tuple[str, ...] = field(default_factory=lambda: (".quit", ".exit"))
    repl_mode: str = "tokens"

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.repl_mode not in REPL_MODES:
            raise ValueError(f"Unknown REPL mode {self.repl_mode!r}, expected one of {REPL_MODES}")

    @classmethod
    def from_env(cls) -> MonkeyConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("MONKEY_PROMPT"):
            config.prompt = val
        if val := os.environ.get("MONKEY_REPL_MODE"):
            if val not in REPL_MODES:
                raise ValueError(f"MONKEY_REPL_MODE must be one of {REPL_MODES}, got {val!r}")
            config.repl_mode = val
        if val := os.environ.get("MONKEY_LOG_LEVEL"):
            config.log_level = val.upper()

        return config


# Module-level singleton
_config: MonkeyConfig | None = None


def get_config() -> MonkeyConfig:
    """Return the global Monkey config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = MonkeyConfig.from_env()
    return _config


def set_config(config: MonkeyConfig | None) -> None:
    """Override the global config (useful in tests). None resets to env defaults."""
    global _config
    _config = config
