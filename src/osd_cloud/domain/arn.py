"""ARN value type and role ARN construction."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..constants import DEFAULT_PARTITION
from ..exceptions import ArnParseError


@dataclass(frozen=True)
class Arn:
    """Structured AWS resource name.

    Attributes:
        partition: Partition name (``aws``, ``aws-us-gov``, ``aws-cn``)
        service: Service namespace, e.g. ``iam`` or ``sts``
        region: Region, empty for global services
        account_id: Twelve digit account id, not validated
        resource: Resource path, e.g. ``role/RH-SRE-CCS-Access``
    """

    partition: str
    service: str
    region: str
    account_id: str
    resource: str

    @classmethod
    def parse(cls, arn: str) -> Arn:
        """Parse ``arn:partition:service:region:account-id:resource``.

        The resource section may itself contain ``:``.

        Raises:
            ArnParseError: If the prefix is wrong or sections are missing
        """
        if not isinstance(arn, str) or not arn.startswith("arn:"):
            raise ArnParseError(str(arn), "arn: prefix not found")
        sections = arn.split(":", 5)
        if len(sections) != 6:
            raise ArnParseError(arn, "not enough sections")
        _, partition, service, region, account_id, resource = sections
        return cls(
            partition=partition,
            service=service,
            region=region,
            account_id=account_id,
            resource=resource,
        )

    def with_partition(self, partition: str) -> Arn:
        return replace(self, partition=partition)

    @property
    def resource_parts(self) -> list[str]:
        return self.resource.split("/")

    def __str__(self) -> str:
        return f"arn:{self.partition}:{self.service}:{self.region}:{self.account_id}:{self.resource}"


def build_role_arn(account_id: str, role_name: str) -> str:
    """Return the IAM role ARN for ``role_name`` in ``account_id``.

    Inputs are not validated; STS rejects bad identifiers downstream.
    """
    return f"arn:{DEFAULT_PARTITION}:iam::{account_id}:role/{role_name}"
