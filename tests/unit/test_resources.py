import pytest
from aws_cdk import aws_ec2 as ec2
from aws_cdk.assertions import Template

import common.constants as constants
from common.errors import ConfigurationError
from common.stack_context import TagSet
from networking.resources import (
    build_network,
    build_private_subnet,
    build_public_subnet,
)
from stack_test_helpers import build_bare_context, build_stack, tags_as_dict

TAGS = TagSet({"Project": "test", "Environment": "dev"})


@pytest.fixture
def bare():
    return build_bare_context()


def test_builders_declare_vpc_and_subnets(bare):
    context, params = bare
    vpc = build_network(context, TAGS, params[constants.PARAM_VPC_CIDR])
    private = build_private_subnet(
        context,
        TAGS,
        params[constants.PARAM_PRIVATE_CIDR],
        params[constants.PARAM_VPC_AZ],
        vpc,
    )
    public = build_public_subnet(
        context,
        TAGS,
        params[constants.PARAM_PUBLIC_CIDR],
        params[constants.PARAM_VPC_AZ],
        vpc,
    )

    assert isinstance(vpc, ec2.CfnVPC)
    assert private.node.id == "PrivateSubnet"
    assert public.node.id == "PublicSubnet"

    template = Template.from_stack(context.scope)
    template.resource_count_is("AWS::EC2::VPC", 1)
    template.has_resource_properties(
        "AWS::EC2::Subnet",
        {
            "CidrBlock": {"Ref": constants.PARAM_PRIVATE_CIDR},
            "VpcId": {"Ref": "Vpc"},
            "MapPublicIpOnLaunch": False,
        },
    )
    for subnet in template.find_resources("AWS::EC2::Subnet").values():
        assert tags_as_dict(subnet) == TAGS.tags


@pytest.mark.parametrize("builder", [build_private_subnet, build_public_subnet])
def test_subnet_rejects_network_from_another_stack(bare, builder):
    context, params = bare
    foreign = build_stack("ForeignStack")

    with pytest.raises(ConfigurationError, match="not declared in stack"):
        builder(
            context,
            TAGS,
            params[constants.PARAM_PRIVATE_CIDR],
            params[constants.PARAM_VPC_AZ],
            foreign.vpc,
        )


@pytest.mark.parametrize("builder", [build_private_subnet, build_public_subnet])
def test_subnet_requires_a_declared_network(bare, builder):
    context, params = bare

    with pytest.raises(ConfigurationError, match="requires a declared VPC"):
        builder(
            context,
            TAGS,
            params[constants.PARAM_PUBLIC_CIDR],
            params[constants.PARAM_VPC_AZ],
            "Vpc",
        )


def test_subnet_rejects_parameters_from_another_stack(bare):
    context, params = bare
    vpc = build_network(context, TAGS, params[constants.PARAM_VPC_CIDR])
    foreign = build_stack("ForeignStack")

    with pytest.raises(ConfigurationError, match="belongs to another stack"):
        build_public_subnet(
            context,
            TAGS,
            foreign.parameters[constants.PARAM_PUBLIC_CIDR],
            params[constants.PARAM_VPC_AZ],
            vpc,
        )


def test_network_requires_cidr_parameter(bare):
    context, params = bare

    with pytest.raises(ConfigurationError, match="not a CIDR parameter"):
        build_network(context, TAGS, params[constants.PARAM_VPC_AZ])


def test_network_rejects_literal_cidr(bare):
    context, _ = bare

    with pytest.raises(ConfigurationError, match="must be a CfnParameter"):
        build_network(context, TAGS, "10.0.0.0/16")


def test_tag_set_extension_keeps_original():
    extended = TAGS.with_tags(Name="extra")

    assert extended.tags == {"Project": "test", "Environment": "dev", "Name": "extra"}
    assert "Name" not in TAGS.tags
    assert [tag.key for tag in extended.as_cfn_tags()] == ["Project", "Environment", "Name"]
