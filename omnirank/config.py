import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    recency_window_days: float = 30.0
    shared_cache: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from OMNIRANK_* environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        raw = env.get("OMNIRANK_RECENCY_WINDOW_DAYS")
        if raw is not None:
            try:
                settings.recency_window_days = float(raw)
            except ValueError as e:
                raise ValueError(
                    f"OMNIRANK_RECENCY_WINDOW_DAYS must be a number, got {raw!r}"
                ) from e
            if settings.recency_window_days <= 0:
                raise ValueError("OMNIRANK_RECENCY_WINDOW_DAYS must be positive")

        raw = env.get("OMNIRANK_SHARED_CACHE")
        if raw is not None:
            value = raw.strip().lower()
            if value in _TRUTHY:
                settings.shared_cache = True
            elif value in _FALSY:
                settings.shared_cache = False
            else:
                raise ValueError(
                    f"OMNIRANK_SHARED_CACHE must be a boolean flag, got {raw!r}"
                )
        return settings
