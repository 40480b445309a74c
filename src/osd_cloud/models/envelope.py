"""Pydantic models for the backplane cloud credentials response.

The backplane wraps the AWS credentials twice: the response body is a JSON
object whose ``credentials`` member is itself a JSON document encoded as a
string. The two layers are modelled separately and decoded in two stages.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.credentials import Credentials


logger = logging.getLogger(__name__)


class CloudCredentialsResponse(BaseModel):
    """Outer envelope returned by the backplane."""

    model_config = ConfigDict(populate_by_name=True)

    cluster_id: str = Field(default="", alias="clusterID")
    console_link: Optional[str] = Field(default=None, alias="consoleLink")
    credentials: Optional[str] = None
    region: Optional[str] = None


class AwsCredentialsResponse(BaseModel):
    """AWS credentials embedded in :class:`CloudCredentialsResponse`."""

    model_config = ConfigDict(populate_by_name=True)

    access_key_id: str = Field(default="", alias="AccessKeyId")
    secret_access_key: str = Field(default="", alias="SecretAccessKey")
    session_token: str = Field(default="", alias="SessionToken")
    region: str = Field(default="", alias="Region")
    # Opaque to the backplane contract; parsed leniently by to_credentials()
    expiration: str = Field(default="", alias="Expiration")

    @field_validator("access_key_id", "secret_access_key", "session_token", "region", "expiration", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    def expiration_time(self) -> Optional[datetime]:
        """Parse ``expiration`` as ISO 8601, or ``None`` when it is not."""
        if not self.expiration:
            return None
        try:
            return datetime.fromisoformat(self.expiration.replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Ignoring unparseable credential expiration %r", self.expiration)
            return None

    def to_credentials(self) -> Credentials:
        return Credentials(
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
            session_token=self.session_token,
            expiration=self.expiration_time(),
        )
