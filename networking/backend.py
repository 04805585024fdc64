from typing import Any, Dict, Mapping, Optional

from attrs import asdict, define, field
from attrs.validators import instance_of
from aws_cdk import Stack
from aws_lambda_powertools import Logger

import common.constants as constants
from common.config import NetworkConfig
from common.errors import ConfigurationError

logger = Logger(service=constants.SERVICE_NAME, child=True)


@define(slots=True, kw_only=True, frozen=True)
class BackendDescriptor:
    """Where the applied state of a stack is kept. Never provisioned here."""

    bucket: str = field(validator=instance_of(str))
    key: str = field(validator=instance_of(str))
    region: str = field(validator=instance_of(str))
    encrypt: bool = field(default=True, validator=instance_of(bool))
    kms_key_id: str = field(default="", validator=instance_of(str))

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "BackendDescriptor":
        return cls(
            bucket=config.state_bucket,
            key=config.state_key,
            region=config.state_region,
            encrypt=config.state_encrypt,
            kms_key_id=config.state_kms_key_id,
        )

    def to_metadata(self) -> Dict[str, Any]:
        return {
            "Bucket": self.bucket,
            "Key": self.key,
            "Region": self.region,
            "Encrypt": self.encrypt,
            "KmsKeyId": self.kms_key_id,
        }


def registered_backend(stack: Stack) -> Optional[Mapping[str, Any]]:
    metadata = stack.template_options.metadata or {}
    return metadata.get(constants.BACKEND_METADATA_KEY)


def attach_backend(stack: Stack, descriptor: BackendDescriptor) -> BackendDescriptor:
    # The template metadata is the single record of the stack's backend
    if registered_backend(stack) is not None:
        raise ConfigurationError(
            f"Stack '{stack.stack_name}' already has a remote state backend"
        )
    stack.add_metadata(constants.BACKEND_METADATA_KEY, descriptor.to_metadata())
    logger.info("Registered remote state backend", stack=stack.stack_name, **asdict(descriptor))
    return descriptor


def register_backend(
    stack: Stack,
    bucket: str,
    key: str,
    region: str,
    encrypt: bool = True,
    kms_key_id: str = "",
) -> BackendDescriptor:
    return attach_backend(
        stack,
        BackendDescriptor(
            bucket=bucket, key=key, region=region, encrypt=encrypt, kms_key_id=kms_key_id
        ),
    )
