from typing import Optional

from aws_cdk import (
    ArnFormat,
    Aws,
    CfnOutput,
    CfnRule,
    CfnRuleAssertion,
    Environment,
    Fn,
    Stack,
)
from aws_lambda_powertools import Logger
from constructs import Construct

import common.constants as constants
from common.config import NetworkConfig
from common.stack_context import StackContext
from networking.parameters import ParameterSet, default_parameter_specs
from networking.resources import (
    build_network,
    build_private_subnet,
    build_public_subnet,
)

logger = Logger(service=constants.SERVICE_NAME, child=True)


class VpcStack(Stack):
    """One VPC with a public and a private subnet."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: Optional[NetworkConfig] = None,
        **kwargs,
    ) -> None:
        config = config or NetworkConfig()
        # Provider configuration, applied once per stack
        kwargs.setdefault("env", Environment(region=config.region))
        super().__init__(scope, construct_id, **kwargs)

        self.config = config
        self.context = StackContext(scope=self, env=config.env)
        self.tags_set = self.context.build_tags()

        # Parameters
        self.parameters = ParameterSet(self)
        for spec in default_parameter_specs(config):
            self.parameters.define(spec)
        self._build_region_rule()

        # VPC
        self.vpc = build_network(
            self.context, self.tags_set, self.parameters[constants.PARAM_VPC_CIDR]
        )
        # Subnets keep the historical wiring: the private builder receives the
        # public CIDR and the public builder receives the private CIDR.
        # The subnet id outputs follow the CIDRs, so PrivateSubnetId is the
        # PublicSubnet declaration (private CIDR) and vice versa.
        self.private_subnet = build_private_subnet(
            self.context,
            self.tags_set,
            self.parameters[constants.PARAM_PUBLIC_CIDR],
            self.parameters[constants.PARAM_VPC_AZ],
            self.vpc,
        )
        self.public_subnet = build_public_subnet(
            self.context,
            self.tags_set,
            self.parameters[constants.PARAM_PRIVATE_CIDR],
            self.parameters[constants.PARAM_VPC_AZ],
            self.vpc,
        )

        self._build_outputs()
        logger.info(
            "Composed stack",
            stack=construct_id,
            region=self.context.aws_region,
            parameters=self.parameters.names,
        )

    def _build_region_rule(self) -> CfnRule:
        """Reject deployments whose region differs from the AwsRegion parameter."""
        region = self.parameters[constants.PARAM_REGION]
        return CfnRule(
            self,
            "RegionMatchesParameter",
            assertions=[
                CfnRuleAssertion(
                    assert_=Fn.condition_equals(region.value_as_string, Aws.REGION),
                    assert_description=(
                        f"{constants.PARAM_REGION} must match the region the stack is deployed to"
                    ),
                )
            ],
        )

    def _build_outputs(self) -> None:
        CfnOutput(
            self,
            constants.OUTPUT_VPC_ID,
            value=self.vpc.ref,
            description="ID of the VPC",
        )
        CfnOutput(
            self,
            constants.OUTPUT_VPC_ARN,
            value=self.format_arn(
                service="ec2",
                resource="vpc",
                resource_name=self.vpc.ref,
                arn_format=ArnFormat.SLASH_RESOURCE_NAME,
            ),
            description="ARN of the VPC",
        )
        CfnOutput(
            self,
            constants.OUTPUT_VPC_CIDR,
            value=self.vpc.attr_cidr_block,
            description="CIDR block of the VPC",
        )
        CfnOutput(
            self,
            constants.OUTPUT_PRIVATE_SUBNET_ID,
            value=self.public_subnet.ref,
            description="ID of the private subnet",
        )
        CfnOutput(
            self,
            constants.OUTPUT_PUBLIC_SUBNET_ID,
            value=self.private_subnet.ref,
            description="ID of the public subnet",
        )


def compose(
    scope: Construct,
    scope_id: str = constants.STACK_ID,
    config: Optional[NetworkConfig] = None,
) -> VpcStack:
    return VpcStack(scope, scope_id, config=config)
