"""Retrieve pre-vended cluster credentials from the backplane API.

Requires a prior login to the API server (for the bearer token) and a
reachable backplane for the cluster (for the URL). Both are resolved by
injected callables.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple, Union

import requests
from pydantic import ValidationError

from ..clients.aws import new_aws_client
from ..clients.protocol import ClientFactory, IdentityChainClient
from ..config import HttpConfig
from ..constants import USER_AGENT
from ..exceptions import ClusterCredentialsError, EnvelopeDecodeError
from ..models.envelope import AwsCredentialsResponse, CloudCredentialsResponse


logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str]
UrlResolver = Callable[[str], str]


def _auth_headers(token: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "User-Agent": USER_AGENT,
    }


def decode_credentials_envelope(
    body: Union[bytes, str],
    *,
    cluster_id: Optional[str] = None,
) -> Tuple[CloudCredentialsResponse, AwsCredentialsResponse]:
    """Decode the outer envelope, then the credentials string inside it.

    Raises:
        EnvelopeDecodeError: ``layer="outer"`` when the body is not a valid
            envelope, ``layer="inner"`` when the embedded credentials are
            missing or invalid. The pydantic error is chained as the cause.
    """
    try:
        envelope = CloudCredentialsResponse.model_validate_json(body)
    except ValidationError as e:
        raise EnvelopeDecodeError("outer", str(e), cluster_id=cluster_id) from e

    if envelope.credentials is None:
        raise EnvelopeDecodeError("inner", "response carries no credentials", cluster_id=cluster_id)

    try:
        aws_credentials = AwsCredentialsResponse.model_validate_json(envelope.credentials)
    except ValidationError as e:
        raise EnvelopeDecodeError("inner", str(e), cluster_id=cluster_id) from e

    return envelope, aws_credentials


def _proceed_with_empty_credentials(
    cluster_id: str,
    status_code: int,
    client_factory: ClientFactory,
    strict: bool,
) -> IdentityChainClient:
    """Handle a non-200 backplane response.

    The command line tool has always carried on here with empty credential
    fields instead of failing, and callers may rely on that. Whether it is an
    intended fallback is undecided, so it is kept as the default and logged;
    ``strict=True`` turns it into an error.
    """
    if strict:
        raise ClusterCredentialsError(
            f"Backplane returned HTTP {status_code} for cluster {cluster_id}",
            cluster_id=cluster_id,
            context={"status_code": status_code},
        )
    logger.warning(
        "Backplane returned HTTP %s for cluster %s; proceeding with empty credentials",
        status_code,
        cluster_id,
    )
    return client_factory("", "", "", "")


def fetch_cluster_credentials(
    cluster_id: str,
    *,
    token_provider: TokenProvider,
    url_resolver: UrlResolver,
    client_factory: ClientFactory = new_aws_client,
    http_config: Optional[HttpConfig] = None,
    session: Optional[requests.Session] = None,
    strict: bool = False,
) -> IdentityChainClient:
    """Create a client from the backplane's cloud credentials for ``cluster_id``.

    Args:
        cluster_id: Cluster identifier
        token_provider: Returns the API server bearer token
        url_resolver: Returns the backplane credentials URL for a cluster
        client_factory: Builds the returned client
        http_config: Request timeouts; read from the environment when omitted
        session: Optional requests session
        strict: Raise on a non-200 response instead of returning a client
            built from empty credentials

    Raises:
        ClusterCredentialsError: Token or URL resolution, transport failure,
            or a non-200 response in strict mode
        EnvelopeDecodeError: The response could not be decoded
    """
    try:
        token = token_provider()
    except Exception as e:
        raise ClusterCredentialsError(f"Unable to retrieve API server token: {e}", cluster_id=cluster_id) from e
    if not token or not token.strip():
        raise ClusterCredentialsError("API server token is empty", cluster_id=cluster_id)

    try:
        url = url_resolver(cluster_id)
    except Exception as e:
        raise ClusterCredentialsError(
            f"Unable to retrieve backplane URL for cluster {cluster_id}: {e}",
            cluster_id=cluster_id,
        ) from e

    http_config = http_config or HttpConfig.from_env()
    client = session or requests

    logger.debug("Requesting cloud credentials for cluster %s from %s", cluster_id, url)
    body: Optional[bytes] = None
    try:
        with client.get(url, headers=_auth_headers(token.strip()), timeout=http_config.requests_timeout) as response:
            status_code = response.status_code
            if status_code == 200:
                body = response.content
    except requests.RequestException as e:
        raise ClusterCredentialsError(
            f"Request for cloud credentials of cluster {cluster_id} failed: {e}",
            cluster_id=cluster_id,
            context={"url": url},
        ) from e

    if body is None:
        return _proceed_with_empty_credentials(cluster_id, status_code, client_factory, strict)

    envelope, aws_credentials = decode_credentials_envelope(body, cluster_id=cluster_id)
    credentials = aws_credentials.to_credentials()
    region = envelope.region or aws_credentials.region
    logger.info("Retrieved cloud credentials for cluster %s (region %s)", cluster_id, region or "unset")
    return client_factory(
        credentials.access_key_id,
        credentials.secret_access_key,
        credentials.session_token,
        region,
    )
