from typing import Any, Dict, Iterator, List, Optional

from attrs import define, field
from attrs.validators import instance_of
from aws_cdk import CfnParameter, Stack
from aws_lambda_powertools import Logger

import common.constants as constants
from common.config import NetworkConfig
from common.errors import ConfigurationError

logger = Logger(service=constants.SERVICE_NAME, child=True)


@define(slots=True, frozen=True, kw_only=True)
class ParameterSpec:
    name: str = field(validator=instance_of(str))
    default: Any = None
    description: str = ""
    type: str = constants.PARAMETER_TYPE_STRING
    sensitive: bool = False
    nullable: bool = True
    cidr: bool = False


def is_cidr_parameter(param: Any) -> bool:
    return (
        isinstance(param, CfnParameter)
        and param.allowed_pattern == constants.CIDR_PATTERN
    )


class ParameterSet:
    """Ordered registry of the stack's CloudFormation parameters.

    Values are never resolved here: a handle's ``value_as_string`` is a
    token that CloudFormation substitutes at deploy time.
    """

    def __init__(self, scope: Stack) -> None:
        self._scope = scope
        self._parameters: Dict[str, CfnParameter] = {}

    def define(self, spec: ParameterSpec) -> CfnParameter:
        if spec.name in self._parameters:
            raise ConfigurationError(f"Parameter '{spec.name}' is already defined")
        if self._scope.node.try_find_child(spec.name) is not None:
            raise ConfigurationError(
                f"Parameter '{spec.name}' collides with an existing construct id"
            )
        if spec.type != constants.PARAMETER_TYPE_STRING:
            raise ConfigurationError(
                f"Parameter '{spec.name}' has unsupported type '{spec.type}'"
            )

        param = CfnParameter(
            self._scope,
            spec.name,
            type=spec.type,
            default=spec.default,
            description=spec.description,
            no_echo=spec.sensitive,
            # CloudFormation has no null; a non-nullable string must be non-empty
            min_length=None if spec.nullable else 1,
            allowed_pattern=constants.CIDR_PATTERN if spec.cidr else None,
            constraint_description=constants.CIDR_CONSTRAINT if spec.cidr else None,
        )
        self._parameters[spec.name] = param
        logger.debug("Defined parameter", parameter=spec.name, default=spec.default)
        return param

    def get(self, name: str) -> Optional[CfnParameter]:
        return self._parameters.get(name)

    def __getitem__(self, name: str) -> CfnParameter:
        try:
            return self._parameters[name]
        except KeyError:
            raise ConfigurationError(f"Parameter '{name}' is not defined") from None

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[CfnParameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    @property
    def names(self) -> List[str]:
        return list(self._parameters)


def default_parameter_specs(config: NetworkConfig) -> List[ParameterSpec]:
    return [
        ParameterSpec(
            name=constants.PARAM_REGION,
            default=config.region,
            description="Choose which AWS region to use",
            nullable=False,
        ),
        ParameterSpec(
            name=constants.PARAM_VPC_CIDR,
            default=config.vpc_cidr,
            description="The CIDR block for the VPC",
            cidr=True,
        ),
        ParameterSpec(
            name=constants.PARAM_PUBLIC_CIDR,
            default=config.public_cidr,
            description="The CIDR block for the public subnet",
            cidr=True,
        ),
        ParameterSpec(
            name=constants.PARAM_PRIVATE_CIDR,
            default=config.private_cidr,
            description="The CIDR block for the private subnet",
            cidr=True,
        ),
        ParameterSpec(
            name=constants.PARAM_VPC_AZ,
            default=config.availability_zone,
            description="The availability zone for the VPC",
        ),
    ]
