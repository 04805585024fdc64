from typing import Dict, List, Optional

from attrs import define, field
from aws_cdk import CfnTag, Stack

import common.constants as constants


@define(slots=True, frozen=True)
class TagSet:
    """Tags applied to every declaration of a stack."""

    tags: Dict[str, str] = field(factory=dict)

    def with_tags(self, **extra: str) -> "TagSet":
        return TagSet({**self.tags, **extra})

    def as_cfn_tags(self) -> List[CfnTag]:
        return [CfnTag(key=key, value=value) for key, value in self.tags.items()]


@define(slots=True, frozen=True)
class StackContext:
    scope: Stack
    env: str = field(
        default=constants.DEFAULT_ENV,
        metadata={"description": "Deployment environment (dev, staging, prod)"},
    )
    service: str = field(default=constants.SERVICE_NAME, init=False)

    @property
    def aws_region(self) -> str:
        return Stack.of(self.scope).region

    # ---------- tags ----------
    def build_tags(self) -> TagSet:
        return TagSet(
            {
                "Project": self.service,
                "Environment": self.env,
                "Name": self.build_resource_name("resources"),
            }
        )

    # ---------- naming ----------
    def build_resource_name(self, resource_type: str, tier: Optional[str] = None) -> str:
        """Build resource name with optional tier.

        Examples:
            - Without tier: vpc-network-resources-dev
            - With tier: vpc-network-private-subnet-dev
        """
        if tier:
            return f"{self.service}-{tier}-{resource_type}-{self.env}".lower()
        return f"{self.service}-{resource_type}-{self.env}".lower()

    def build_resource_id(self, resource_type: str, tier: Optional[str] = None) -> str:
        """Build the logical id, e.g. Vpc or PrivateSubnet."""
        if tier:
            return f"{tier.capitalize()}{resource_type.capitalize()}"
        return resource_type.capitalize()
