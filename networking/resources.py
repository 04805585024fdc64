"""Builders for the network's resource declarations.

Each builder appends exactly one L1 construct to the context's stack and
returns it as the handle later declarations reference. Subnets take the
VPC handle itself, so a subnet cannot be declared before its network.
"""
from typing import Any, Optional

from aws_cdk import CfnParameter, Stack, aws_ec2 as ec2
from aws_lambda_powertools import Logger

import common.constants as constants
from common.errors import ConfigurationError
from common.stack_context import StackContext, TagSet
from networking.parameters import is_cidr_parameter

logger = Logger(service=constants.SERVICE_NAME, child=True)


def _require_own_parameter(context: StackContext, param: Any, role: str) -> CfnParameter:
    if not isinstance(param, CfnParameter):
        raise ConfigurationError(f"{role} must be a CfnParameter, got {type(param).__name__}")
    if Stack.of(param) is not context.scope:
        raise ConfigurationError(f"{role} '{param.node.id}' belongs to another stack")
    return param


def _require_own_network(context: StackContext, network: Any) -> ec2.CfnVPC:
    if not isinstance(network, ec2.CfnVPC):
        raise ConfigurationError(
            f"Subnet requires a declared VPC, got {type(network).__name__}"
        )
    if Stack.of(network) is not context.scope:
        raise ConfigurationError(
            f"VPC '{network.node.path}' is not declared in stack '{context.scope.stack_name}'"
        )
    return network


def build_network(context: StackContext, tags: TagSet, cidr_param: Any) -> ec2.CfnVPC:
    cidr_param = _require_own_parameter(context, cidr_param, "VPC CIDR")
    if not is_cidr_parameter(cidr_param):
        raise ConfigurationError(
            f"Parameter '{cidr_param.node.id}' is not a CIDR parameter"
        )

    logical_id = context.build_resource_id(constants.RESOURCE_VPC)
    vpc = ec2.CfnVPC(
        context.scope,
        logical_id,
        cidr_block=cidr_param.value_as_string,
        enable_dns_support=True,
        enable_dns_hostnames=True,
        instance_tenancy=constants.VPC_INSTANCE_TENANCY,
        tags=tags.as_cfn_tags(),
    )
    logger.info("Declared VPC", logical_id=logical_id, cidr_parameter=cidr_param.node.id)
    return vpc


def _build_subnet(
    context: StackContext,
    tier: str,
    tags: TagSet,
    cidr_param: Any,
    az_param: Any,
    network: Any,
    map_public_ip_on_launch: Optional[bool],
) -> ec2.CfnSubnet:
    network = _require_own_network(context, network)
    cidr_param = _require_own_parameter(context, cidr_param, f"{tier} subnet CIDR")
    az_param = _require_own_parameter(context, az_param, f"{tier} subnet availability zone")

    logical_id = context.build_resource_id(constants.RESOURCE_SUBNET, tier=tier)
    subnet = ec2.CfnSubnet(
        context.scope,
        logical_id,
        vpc_id=network.ref,
        availability_zone=az_param.value_as_string,
        cidr_block=cidr_param.value_as_string,
        map_public_ip_on_launch=map_public_ip_on_launch,
        tags=tags.as_cfn_tags(),
    )
    logger.info(
        "Declared subnet",
        logical_id=logical_id,
        vpc=network.node.id,
        cidr_parameter=cidr_param.node.id,
    )
    return subnet


def build_private_subnet(
    context: StackContext,
    tags: TagSet,
    cidr_param: Any,
    az_param: Any,
    network: Any,
) -> ec2.CfnSubnet:
    return _build_subnet(
        context,
        constants.TIER_PRIVATE,
        tags,
        cidr_param,
        az_param,
        network,
        map_public_ip_on_launch=False,
    )


def build_public_subnet(
    context: StackContext,
    tags: TagSet,
    cidr_param: Any,
    az_param: Any,
    network: Any,
) -> ec2.CfnSubnet:
    # Public IPs stay off here as well; compose() keeps the historical wiring
    return _build_subnet(
        context,
        constants.TIER_PUBLIC,
        tags,
        cidr_param,
        az_param,
        network,
        map_public_ip_on_launch=False,
    )
