"""Process configuration for the credential chains.

Values are read from the environment when ``from_env()`` is called, never at
import time, so a long-lived process picks up tier changes between calls.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from botocore.config import Config as BotocoreConfig

from .constants import JUMPROLE_ACCOUNT_ID_ENV
from .exceptions import ConfigurationError, MissingConfigurationError


DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 60.0


@dataclass(frozen=True)
class ChainConfig:
    """Configuration for the jump-role chain.

    Attributes:
        jump_account_id: Account id hosting the technical support jump role.
            Differs between staging and production.
    """

    jump_account_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> ChainConfig:
        value = os.getenv(JUMPROLE_ACCOUNT_ID_ENV, "").strip()
        return cls(jump_account_id=value or None)

    def require_jump_account_id(self) -> str:
        """Return the jump account id or raise if it is not configured."""
        if not self.jump_account_id:
            raise MissingConfigurationError(JUMPROLE_ACCOUNT_ID_ENV)
        return self.jump_account_id


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}", {"variable": name}) from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}", {"variable": name})
    return value


@dataclass(frozen=True)
class HttpConfig:
    """Timeouts for STS and backplane requests (seconds)."""

    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    @classmethod
    def from_env(cls) -> HttpConfig:
        return cls(
            connect_timeout=_float_env("OSD_CLOUD_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            read_timeout=_float_env("OSD_CLOUD_READ_TIMEOUT", DEFAULT_READ_TIMEOUT),
        )

    @property
    def requests_timeout(self) -> Tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)

    def botocore_config(self) -> BotocoreConfig:
        """botocore client config with these timeouts and a single attempt per call."""
        return BotocoreConfig(
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"total_max_attempts": 1, "mode": "standard"},
        )
