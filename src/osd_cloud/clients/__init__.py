"""Identity-chain clients."""

from .aws import AwsClient, new_aws_client
from .protocol import ClientFactory, IdentityChainClient

__all__ = [
    "AwsClient",
    "ClientFactory",
    "IdentityChainClient",
    "new_aws_client",
]
