"""Tests for session name derivation."""

from __future__ import annotations

import pytest

from osd_cloud.exceptions import ArnParseError, IdentityServiceError, SessionNameError
from osd_cloud.services.role_chain import derive_session_name
from tests.helpers import FakeIdentityClient


def client_with_identity(arn: str) -> FakeIdentityClient:
    return FakeIdentityClient("operator", [], identity_arn=arn)


def test_assumed_role_uses_session_segment():
    client = client_with_identity("arn:aws:sts::123456789012:assumed-role/SomeRole/jdoe")
    assert derive_session_name(client) == "RH-SRE-jdoe"


def test_iam_user_arn():
    client = client_with_identity("arn:aws:iam::123456789012:user/jdoe")
    assert derive_session_name(client) == "RH-SRE-jdoe"


def test_iam_user_with_path():
    client = client_with_identity("arn:aws:iam::123456789012:user/sre/jdoe")
    assert derive_session_name(client) == "RH-SRE-jdoe"


def test_short_resource_raises_explicit_error():
    client = client_with_identity("arn:aws:iam::123456789012:root")

    with pytest.raises(SessionNameError) as exc_info:
        derive_session_name(client)

    assert "expected at least 2" in str(exc_info.value)
    assert exc_info.value.context["arn"] == "arn:aws:iam::123456789012:root"


@pytest.mark.parametrize("resource", ["user/", "assumed-role/SomeRole/"])
def test_empty_principal_name_raises(resource):
    client = client_with_identity(f"arn:aws:iam::123456789012:{resource}")

    with pytest.raises(SessionNameError, match="no principal name"):
        derive_session_name(client)


def test_malformed_identity_arn():
    with pytest.raises(ArnParseError):
        derive_session_name(client_with_identity("jdoe"))


def test_identity_lookup_failure_propagates():
    class FailingClient:
        def get_caller_identity(self):
            raise IdentityServiceError("GetCallerIdentity failed: ExpiredToken: token expired")

    with pytest.raises(IdentityServiceError):
        derive_session_name(FailingClient())
