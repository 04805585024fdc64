import os
from typing import Mapping, Optional

from attrs import define, field
from attrs.validators import instance_of

import common.constants as constants
from common.errors import ConfigurationError

_TRUTHY = {"true", "1", "yes"}
_FALSY = {"false", "0", "no"}


def _lookup(environ: Mapping[str, str], name: str, default: str) -> str:
    # An empty variable counts as unset
    return environ.get(name) or default


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if not value:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be one of true/false/1/0/yes/no, got {value!r}")


@define(slots=True, frozen=True, kw_only=True)
class NetworkConfig:
    """Inputs for one synthesis run.

    Every field has a literal default so an empty environment yields the
    stock topology.
    """

    region: str = field(default=constants.DEFAULT_REGION, validator=instance_of(str))
    vpc_cidr: str = field(default=constants.VPC_CIDR, validator=instance_of(str))
    public_cidr: str = field(default=constants.PUBLIC_CIDR, validator=instance_of(str))
    private_cidr: str = field(default=constants.PRIVATE_CIDR, validator=instance_of(str))
    availability_zone: str = field(default=constants.VPC_AZ, validator=instance_of(str))
    env: str = field(
        default=constants.DEFAULT_ENV,
        validator=instance_of(str),
        metadata={"description": "Deployment environment (dev, staging, prod)"},
    )
    state_bucket: str = field(default=constants.STATE_BUCKET, validator=instance_of(str))
    state_key: str = field(default=constants.STATE_KEY, validator=instance_of(str))
    state_region: str = field(default=constants.STATE_REGION, validator=instance_of(str))
    state_encrypt: bool = field(default=constants.STATE_ENCRYPT, validator=instance_of(bool))
    state_kms_key_id: str = field(
        default=constants.STATE_KMS_KEY_ID, validator=instance_of(str)
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NetworkConfig":
        environ = os.environ if environ is None else environ
        return cls(
            region=_lookup(environ, constants.ENV_REGION, constants.DEFAULT_REGION),
            vpc_cidr=_lookup(environ, constants.ENV_VPC_CIDR, constants.VPC_CIDR),
            public_cidr=_lookup(environ, constants.ENV_PUBLIC_CIDR, constants.PUBLIC_CIDR),
            private_cidr=_lookup(
                environ, constants.ENV_PRIVATE_CIDR, constants.PRIVATE_CIDR
            ),
            availability_zone=_lookup(environ, constants.ENV_VPC_AZ, constants.VPC_AZ),
            env=_lookup(environ, constants.ENV_ENVIRONMENT, constants.DEFAULT_ENV),
            state_bucket=_lookup(
                environ, constants.ENV_STATE_BUCKET, constants.STATE_BUCKET
            ),
            state_key=_lookup(environ, constants.ENV_STATE_KEY, constants.STATE_KEY),
            state_region=_lookup(
                environ, constants.ENV_STATE_REGION, constants.STATE_REGION
            ),
            state_encrypt=_parse_bool(
                constants.ENV_STATE_ENCRYPT,
                environ.get(constants.ENV_STATE_ENCRYPT),
                constants.STATE_ENCRYPT,
            ),
            state_kms_key_id=_lookup(
                environ, constants.ENV_STATE_KMS_KEY_ID, constants.STATE_KMS_KEY_ID
            ),
        )
