from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import pytest
from aws_cdk import App, Stack
from aws_cdk.assertions import Template

from common.config import NetworkConfig
from common.stack_context import StackContext
from networking.parameters import ParameterSet, default_parameter_specs
from networking.vpc_stack import VpcStack, compose


# ------------------- Test Case Data Classes -------------------
@dataclass(frozen=True)
class SubnetTestCase:
    id: str
    cidr_parameter: str
    default_cidr: str
    map_public_ip_on_launch: bool


@dataclass(frozen=True)
class OutputTestCase:
    id: str
    value: Any


# ------------------- Helper Functions -------------------


def find_resources_by_type(
    template: Template, resource_type: str, props: Optional[dict] = None
) -> Mapping[str, Any]:

    return template.find_resources(resource_type, props=props)


def get_single_resource_id(
    resources: Mapping[str, Any], resource_type: str = "resource"
) -> str:
    assert len(resources) == 1, f"expected exactly one {resource_type}"
    return next(iter(resources))


def tags_as_dict(resource: Mapping[str, Any]) -> Dict[str, str]:
    return {tag["Key"]: tag["Value"] for tag in resource["Properties"]["Tags"]}


def build_stack(
    stack_id: str = "TestVpcStack", config: Optional[NetworkConfig] = None
) -> VpcStack:
    app = App()
    return compose(app, stack_id, config)


def build_template(stack_id: str = "TestVpcStack"):
    return Template.from_stack(build_stack(stack_id))


def build_bare_context(stack_id: str = "BareStack"):
    """A stack holding only the default parameters, for driving builders directly."""
    stack = Stack(App(), stack_id)
    parameters = ParameterSet(stack)
    for spec in default_parameter_specs(NetworkConfig()):
        parameters.define(spec)
    context = StackContext(scope=stack)
    return context, parameters


# ------------------- Pytest Fixtures -------------------


@pytest.fixture
def stack() -> VpcStack:
    return build_stack()


@pytest.fixture
def template(stack: VpcStack) -> Template:
    return Template.from_stack(stack)


@pytest.fixture
def json_template(template: Template) -> Mapping[str, Any]:
    return template.to_json()
