"""Runtime settings read from environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROVIDER_URL = "http://127.0.0.1:3845/sse"


class ConfigError(ValueError):
    """Raised when an environment variable cannot be parsed."""

    def __init__(self, var_name: str, message: str):
        super().__init__(f"{var_name}: {message}")
        self.var_name = var_name


def _get_env(env: Mapping[str, str], var_name: str) -> Optional[str]:
    raw = env.get(var_name)
    if raw is None:
        return None
    value = raw.strip()
    return value if value else None


@dataclass(frozen=True)
class Settings:
    """
    figflow settings.

    ``provider_timeout`` is in seconds; None leaves provider calls without a
    timeout.
    """
    provider_url: str = DEFAULT_PROVIDER_URL
    provider_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env

        timeout = None
        raw_timeout = _get_env(env, "FIGFLOW_PROVIDER_TIMEOUT")
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError("FIGFLOW_PROVIDER_TIMEOUT", f"expected a number, got {raw_timeout!r}") from None
            if timeout <= 0:
                raise ConfigError("FIGFLOW_PROVIDER_TIMEOUT", "must be positive")

        return cls(
            provider_url=_get_env(env, "FIGFLOW_PROVIDER_URL") or DEFAULT_PROVIDER_URL,
            provider_timeout=timeout,
        )
