"""osd-cloud - temporary AWS credentials for SRE access into customer accounts.

This package chains STS assume-role calls from an operator identity through
an internal jump account into customer accounts, and retrieves pre-vended
cluster credentials from the backplane API.
"""

from __future__ import annotations

from .clients import AwsClient, ClientFactory, IdentityChainClient, new_aws_client
from .config import ChainConfig, HttpConfig
from .domain import Arn, Credentials, build_role_arn
from .exceptions import (
    ArnParseError,
    ClientConstructionError,
    ClusterCredentialsError,
    ConfigurationError,
    EnvelopeDecodeError,
    IdentityServiceError,
    JumpRoleError,
    MissingConfigurationError,
    OsdCloudError,
    SessionNameError,
    TargetRoleError,
)
from .services import (
    assume_jump_role,
    assume_organization_account_access,
    assume_support_role,
    decode_credentials_envelope,
    derive_session_name,
    fetch_cluster_credentials,
    generate_organization_account_access_credentials,
)

__all__ = [
    # Clients
    "AwsClient",
    "ClientFactory",
    "IdentityChainClient",
    "new_aws_client",
    # Configuration
    "ChainConfig",
    "HttpConfig",
    # Domain
    "Arn",
    "Credentials",
    "build_role_arn",
    # Chains
    "assume_jump_role",
    "assume_organization_account_access",
    "assume_support_role",
    "derive_session_name",
    "generate_organization_account_access_credentials",
    # Backplane
    "decode_credentials_envelope",
    "fetch_cluster_credentials",
    # Errors
    "ArnParseError",
    "ClientConstructionError",
    "ClusterCredentialsError",
    "ConfigurationError",
    "EnvelopeDecodeError",
    "IdentityServiceError",
    "JumpRoleError",
    "MissingConfigurationError",
    "OsdCloudError",
    "SessionNameError",
    "TargetRoleError",
]
