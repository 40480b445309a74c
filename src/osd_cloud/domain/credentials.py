"""Temporary credential value type."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Credentials:
    """Temporary AWS credentials produced by an assume-role call.

    Whoever holds these can act as the assumed role until ``expiration``.
    The secret and token are kept out of ``repr`` so they do not leak into
    logs or tracebacks.
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(repr=False)
    expiration: Optional[datetime] = None

    @classmethod
    def from_sts(cls, credentials: Mapping[str, Any]) -> Credentials:
        """Build from the ``Credentials`` member of an STS response."""
        return cls(
            access_key_id=credentials["AccessKeyId"],
            secret_access_key=credentials["SecretAccessKey"],
            session_token=credentials["SessionToken"],
            expiration=credentials.get("Expiration"),
        )
