"""Settings for config-guard's own tooling, read from CONFIG_GUARD_* env vars."""

from .settings import GuardSettings, load_settings

get_settings = load_settings  # alias

__all__ = ["GuardSettings", "load_settings", "get_settings"]
