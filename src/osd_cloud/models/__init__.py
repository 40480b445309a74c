"""Wire models for external HTTP APIs."""

from .envelope import AwsCredentialsResponse, CloudCredentialsResponse

__all__ = ["AwsCredentialsResponse", "CloudCredentialsResponse"]
