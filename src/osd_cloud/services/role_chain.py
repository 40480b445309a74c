"""Assume-role chains into customer accounts.

Three chains are provided:

- Jump role: caller -> ``RH-SRE-CCS-Access`` in the caller's own account ->
  ``RH-Technical-Support-Access`` in the jump account.
- Support role: jump role chain, then one more hop into a target role,
  usually a cluster's support role in the customer account.
- Organization account access: a single hop into
  ``OrganizationAccountAccessRole`` of a linked account, for callers that
  hold root-organization privileges.

Each step builds a fresh client from the previous step's credentials; no
client is mutated and nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..clients.aws import new_aws_client
from ..clients.protocol import ClientFactory, IdentityChainClient
from ..config import ChainConfig
from ..constants import (
    ORGANIZATION_ACCOUNT_ACCESS_ROLE_NAME,
    RH_SRE_CCS_ACCESS_ROLE_NAME,
    RH_TECHNICAL_SUPPORT_ACCESS_ROLE_NAME,
    SESSION_NAME_PREFIX,
)
from ..domain.arn import Arn, build_role_arn
from ..domain.credentials import Credentials
from ..exceptions import JumpRoleError, OsdCloudError, SessionNameError, TargetRoleError


logger = logging.getLogger(__name__)


def _client_for(credentials: Credentials, region: str, client_factory: ClientFactory) -> IdentityChainClient:
    return client_factory(
        credentials.access_key_id,
        credentials.secret_access_key,
        credentials.session_token,
        region,
    )


def generate_organization_account_access_credentials(
    client: IdentityChainClient,
    account_id: str,
    session_name: str,
    partition: str,
) -> Credentials:
    """Assume ``OrganizationAccountAccessRole`` in a linked account.

    Only works when ``client`` belongs to the organization's root account and
    ``account_id`` is a linked account of that organization. The role ARN is
    rendered in ``partition`` regardless of the builder's default.
    """
    target_role_arn = Arn.parse(build_role_arn(account_id, ORGANIZATION_ACCOUNT_ACCESS_ROLE_NAME))
    target_role_arn = target_role_arn.with_partition(partition)
    return client.assume_role(str(target_role_arn), session_name)


def assume_organization_account_access(
    client: IdentityChainClient,
    account_id: str,
    region: str,
    session_name: str,
    partition: str,
    *,
    client_factory: ClientFactory = new_aws_client,
) -> IdentityChainClient:
    """Return a client authenticated as ``OrganizationAccountAccessRole`` in ``account_id``."""
    credentials = generate_organization_account_access_credentials(client, account_id, session_name, partition)
    return _client_for(credentials, region, client_factory)


def assume_jump_role(
    client: IdentityChainClient,
    account_id: str,
    region: str,
    session_name: str,
    *,
    config: Optional[ChainConfig] = None,
    client_factory: ClientFactory = new_aws_client,
) -> Credentials:
    """Perform the assume-role chain from the caller to the jump role.

    The whole chain stays inside the operator's account boundary, so every
    failure is raised as :class:`JumpRoleError` naming the failing step.

    Args:
        client: Client authenticated as the operator
        account_id: Customer account the chain is ultimately for, used for logging
        region: Region for the intermediate client
        session_name: Session name tagged on every assumed role
        config: Chain configuration; read from the environment when omitted
        client_factory: Builds clients from intermediate credentials

    Returns:
        Credentials for ``RH-Technical-Support-Access`` in the jump account
    """
    step = "get_caller_identity"
    try:
        caller_arn = Arn.parse(client.get_caller_identity())

        step = "assume_ccs_access_role"
        ccs_access_role_arn = build_role_arn(caller_arn.account_id, RH_SRE_CCS_ACCESS_ROLE_NAME)
        ccs_access_credentials = client.assume_role(ccs_access_role_arn, session_name)

        step = "create_ccs_access_client"
        ccs_access_client = _client_for(ccs_access_credentials, region, client_factory)

        step = "resolve_jump_account"
        jump_account_id = (config or ChainConfig.from_env()).require_jump_account_id()

        step = "assume_jump_role"
        jump_role_arn = build_role_arn(jump_account_id, RH_TECHNICAL_SUPPORT_ACCESS_ROLE_NAME)
        jump_credentials = ccs_access_client.assume_role(jump_role_arn, session_name)
    except JumpRoleError:
        raise
    except OsdCloudError as e:
        raise JumpRoleError(str(e), step=step, context={"account_id": account_id}) from e

    logger.info("Reached jump role %s for account %s", jump_role_arn, account_id)
    return jump_credentials


def assume_support_role(
    client: IdentityChainClient,
    account_id: str,
    region: str,
    session_name: str,
    target_role: str,
    *,
    config: Optional[ChainConfig] = None,
    client_factory: ClientFactory = new_aws_client,
) -> Credentials:
    """Assume ``target_role`` by way of the jump role.

    Failures before the jump role is reached raise :class:`JumpRoleError`;
    failures of the final hop raise :class:`TargetRoleError`.
    """
    jump_credentials = assume_jump_role(
        client,
        account_id,
        region,
        session_name,
        config=config,
        client_factory=client_factory,
    )

    try:
        jump_client = _client_for(jump_credentials, region, client_factory)
        target_credentials = jump_client.assume_role(target_role, session_name)
    except OsdCloudError as e:
        raise TargetRoleError(target_role, str(e)) from e

    return target_credentials


def derive_session_name(client: IdentityChainClient) -> str:
    """Build the session name ``RH-SRE-<user>`` from the caller's identity ARN.

    The user is the principal name that follows the resource type and any
    path or role segment: ``jdoe`` in both ``user/jdoe`` and
    ``assumed-role/SomeRole/jdoe``.
    """
    caller_arn = Arn.parse(client.get_caller_identity())
    parts = caller_arn.resource_parts
    if len(parts) < 2:
        raise SessionNameError(
            f"Cannot derive a session name from {caller_arn}: resource {caller_arn.resource!r} "
            f"has {len(parts)} segment(s), expected at least 2",
            {"arn": str(caller_arn)},
        )
    if not parts[-1]:
        raise SessionNameError(
            f"Cannot derive a session name from {caller_arn}: resource {caller_arn.resource!r} "
            f"has no principal name",
            {"arn": str(caller_arn)},
        )
    return f"{SESSION_NAME_PREFIX}{parts[-1]}"
