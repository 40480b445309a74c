"""Shared fakes for the credential chain tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from osd_cloud.domain.credentials import Credentials
from osd_cloud.exceptions import IdentityServiceError


OPERATOR_ACCOUNT_ID = "111111111111"
JUMP_ACCOUNT_ID = "222222222222"
CUSTOMER_ACCOUNT_ID = "333333333333"
OPERATOR_ARN = f"arn:aws:sts::{OPERATOR_ACCOUNT_ID}:assumed-role/SomeRole/jdoe"


class FakeIdentityClient:
    """In-memory identity-chain client that records every call.

    All clients created by one :class:`FakeClientFactory` share a call log,
    so tests can assert on the order of calls across the whole chain.
    """

    def __init__(
        self,
        name: str,
        calls: List[Tuple[str, str, str]],
        identity_arn: str = OPERATOR_ARN,
        failures: Optional[Dict[str, Exception]] = None,
    ) -> None:
        self.name = name
        self.calls = calls
        self.identity_arn = identity_arn
        self.failures = failures if failures is not None else {}

    def get_caller_identity(self) -> str:
        self.calls.append((self.name, "get_caller_identity", ""))
        return self.identity_arn

    def assume_role(self, role_arn: str, session_name: str) -> Credentials:
        self.calls.append((self.name, "assume_role", role_arn))
        if role_arn in self.failures:
            raise self.failures[role_arn]
        suffix = role_arn.rsplit("/", 1)[-1]
        return Credentials(
            access_key_id=f"AKIA-{suffix}",
            secret_access_key=f"secret-{suffix}",
            session_token=f"token-{suffix}",
            expiration=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )


class FakeClientFactory:
    """Client factory producing :class:`FakeIdentityClient` instances named by access key."""

    def __init__(self, calls: List[Tuple[str, str, str]], failures: Dict[str, Exception]) -> None:
        self.calls = calls
        self.failures = failures
        self.created: List[Tuple[str, str, str, str]] = []

    def __call__(self, access_key_id: str, secret_access_key: str, session_token: str, region: str):
        self.created.append((access_key_id, secret_access_key, session_token, region))
        return FakeIdentityClient(access_key_id, self.calls, failures=self.failures)


def access_denied(role_arn: str) -> IdentityServiceError:
    return IdentityServiceError(
        f"AssumeRole failed: AccessDenied: not authorized to perform sts:AssumeRole on {role_arn}",
        aws_error_code="AccessDenied",
    )
