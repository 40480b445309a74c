"""boto3-backed identity-chain client.

Translates botocore failures into package exceptions at this boundary so
the chain functions never see botocore types.
"""

from __future__ import annotations

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config import HttpConfig
from ..domain.credentials import Credentials
from ..exceptions import ClientConstructionError, IdentityServiceError


logger = logging.getLogger(__name__)


def _identity_service_error(action: str, e: Exception, **context: str) -> IdentityServiceError:
    if isinstance(e, ClientError):
        error = e.response.get("Error", {})
        code = error.get("Code")
        message = error.get("Message", str(e))
        return IdentityServiceError(f"{action} failed: {code}: {message}", aws_error_code=code, context=context)
    return IdentityServiceError(f"{action} failed: {e}", context=context)


class AwsClient:
    """STS client bound to one boto3 session."""

    def __init__(self, session: boto3.Session, http_config: Optional[HttpConfig] = None) -> None:
        self._session = session
        self._http_config = http_config or HttpConfig.from_env()
        self._sts = None

    @property
    def session(self) -> boto3.Session:
        return self._session

    def _sts_client(self):
        if self._sts is None:
            try:
                self._sts = self._session.client("sts", config=self._http_config.botocore_config())
            except BotoCoreError as e:
                raise ClientConstructionError(f"Failed to create STS client: {e}") from e
        return self._sts

    def get_caller_identity(self) -> str:
        try:
            response = self._sts_client().get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            raise _identity_service_error("GetCallerIdentity", e) from e
        logger.debug("Caller identity: %s", response["Arn"])
        return response["Arn"]

    def assume_role(self, role_arn: str, session_name: str) -> Credentials:
        try:
            response = self._sts_client().assume_role(RoleArn=role_arn, RoleSessionName=session_name)
        except (ClientError, BotoCoreError) as e:
            raise _identity_service_error("AssumeRole", e, role_arn=role_arn, session_name=session_name) from e
        logger.info("Assumed into %s with session name: %s", role_arn, session_name)
        return Credentials.from_sts(response["Credentials"])


def new_aws_client(
    access_key_id: str,
    secret_access_key: str,
    session_token: str,
    region: str,
    *,
    http_config: Optional[HttpConfig] = None,
) -> AwsClient:
    """Create a client authenticated with explicit credentials.

    Empty values are passed as ``None``; with no keys at all boto3 falls back
    to its default credential chain.

    Raises:
        ClientConstructionError: When boto3 cannot create the session
    """
    try:
        session = boto3.Session(
            aws_access_key_id=access_key_id or None,
            aws_secret_access_key=secret_access_key or None,
            aws_session_token=session_token or None,
            region_name=region or None,
        )
    except BotoCoreError as e:
        raise ClientConstructionError(f"Failed to create AWS session: {e}", {"region": region}) from e
    return AwsClient(session, http_config=http_config)

