"""Value types shared by the credential chains."""

from .arn import Arn, build_role_arn
from .credentials import Credentials

__all__ = ["Arn", "build_role_arn", "Credentials"]
