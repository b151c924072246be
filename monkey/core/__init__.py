"""Monkey core: shared configuration.

    from monkey.core import get_config
"""

from monkey.core.config import MonkeyConfig, get_config, set_config

__all__ = [
    "MonkeyConfig",
    "get_config",
    "set_config",
]
