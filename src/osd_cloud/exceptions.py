"""Shared exception types for the osd-cloud credential helpers.

Every error raised by this package derives from :class:`OsdCloudError`, so a
command layer can catch them all at once while still telling the failure
domains apart:

- ``IdentityServiceError``: STS rejected a call (bad credentials, missing
  permission, nonexistent role).
- ``ArnParseError``: an identifier could not be parsed.
- ``JumpRoleError``: the chain inside the operator's own account boundary
  failed, which points at internal misconfiguration.
- ``TargetRoleError``: the final hop into a customer role failed.
- ``ClusterCredentialsError``: the backplane credential path failed.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class OsdCloudError(RuntimeError):
    """Base exception for osd-cloud errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "osd_cloud_error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}


class ConfigurationError(OsdCloudError):
    """Invalid process configuration value."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, error_code="CONFIGURATION_ERROR", context=context)


class IdentityServiceError(OsdCloudError):
    """The identity service rejected a request.

    The AWS error code and message are carried verbatim in the exception text
    and in ``aws_error_code``.
    """

    def __init__(
        self,
        message: str,
        *,
        aws_error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code="IDENTITY_SERVICE_ERROR", context=context)
        self.aws_error_code = aws_error_code


class ArnParseError(OsdCloudError, ValueError):
    """An ARN string is malformed."""

    def __init__(self, arn: str, reason: str) -> None:
        super().__init__(
            f"Invalid ARN {arn!r}: {reason}",
            error_code="MALFORMED_ARN",
            context={"arn": arn},
        )
        self.arn = arn


class ClientConstructionError(OsdCloudError):
    """A client could not be built from a set of credentials."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, error_code="CLIENT_CONSTRUCTION_FAILED", context=context)


class JumpRoleError(OsdCloudError):
    """The assume-role chain to the jump role failed.

    This chain never leaves the operator's own accounts, so any failure here
    is an internal misconfiguration rather than a customer-side problem.

    Attributes:
        step: Name of the chain step that failed
    """

    def __init__(
        self,
        message: str,
        *,
        step: str,
        error_code: str = "INTERNAL_CHAIN_ERROR",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"Internal misconfiguration during jump role chain ({step}): {message}",
            error_code=error_code,
            context=context,
        )
        self.step = step


class MissingConfigurationError(JumpRoleError):
    """The jump account id is not configured."""

    def __init__(self, variable: str) -> None:
        super().__init__(
            f"{variable} is not set",
            step="resolve_jump_account",
            error_code="MISSING_CONFIGURATION",
            context={"variable": variable},
        )
        self.variable = variable


class TargetRoleError(OsdCloudError):
    """The final target role could not be assumed from the jump role.

    Usually a customer-side permission or role-existence problem.
    """

    def __init__(self, target_role: str, message: str) -> None:
        super().__init__(
            f"Unable to assume target role {target_role}: {message}",
            error_code="TARGET_ROLE_ERROR",
            context={"target_role": target_role},
        )
        self.target_role = target_role


class SessionNameError(OsdCloudError):
    """A session name could not be derived from the caller identity."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, error_code="SESSION_NAME_ERROR", context=context)


class ClusterCredentialsError(OsdCloudError):
    """Retrieving pre-vended cluster credentials failed."""

    def __init__(
        self,
        message: str,
        *,
        cluster_id: Optional[str] = None,
        error_code: str = "CLUSTER_CREDENTIALS_ERROR",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ctx = dict(context or {})
        if cluster_id is not None:
            ctx.setdefault("cluster_id", cluster_id)
        super().__init__(message, error_code=error_code, context=ctx)
        self.cluster_id = cluster_id


class EnvelopeDecodeError(ClusterCredentialsError):
    """One layer of the credential envelope could not be decoded.

    Attributes:
        layer: ``"outer"`` for the response body, ``"inner"`` for the
            embedded credentials string
    """

    def __init__(self, layer: str, message: str, *, cluster_id: Optional[str] = None) -> None:
        super().__init__(
            f"Unable to unmarshal {'cloud' if layer == 'outer' else 'aws'} credentials: {message}",
            cluster_id=cluster_id,
            error_code="ENVELOPE_DECODE_ERROR",
            context={"layer": layer},
        )
        self.layer = layer
