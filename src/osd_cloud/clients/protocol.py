"""Protocol contracts for identity-chain clients.

The chain functions only depend on these contracts, so they can be driven by
the boto3-backed :class:`~osd_cloud.clients.aws.AwsClient` or by a fake in
tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.credentials import Credentials


@runtime_checkable
class IdentityChainClient(Protocol):
    """A client that can report its own identity and assume roles."""

    def get_caller_identity(self) -> str:
        """Return the ARN of the identity this client authenticates as."""
        ...

    def assume_role(self, role_arn: str, session_name: str) -> Credentials:
        """Assume ``role_arn`` and return the temporary credentials."""
        ...


class ClientFactory(Protocol):
    """Builds a new client from a set of credentials."""

    def __call__(
        self,
        access_key_id: str,
        secret_access_key: str,
        session_token: str,
        region: str,
    ) -> IdentityChainClient: ...
