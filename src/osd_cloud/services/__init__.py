"""Credential acquisition services."""

from .cluster_credentials import decode_credentials_envelope, fetch_cluster_credentials
from .role_chain import (
    assume_jump_role,
    assume_organization_account_access,
    assume_support_role,
    derive_session_name,
    generate_organization_account_access_credentials,
)

__all__ = [
    "assume_jump_role",
    "assume_organization_account_access",
    "assume_support_role",
    "decode_credentials_envelope",
    "derive_session_name",
    "fetch_cluster_credentials",
    "generate_organization_account_access_credentials",
]
