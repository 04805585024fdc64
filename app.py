#!/usr/bin/env python3
"""AWS CDK entrypoint for declaring the VPC network.

The App is created here and handed to every stack explicitly; inputs come
from the environment (see common.config.NetworkConfig) and fall back to
literal defaults.
"""
import os

import aws_cdk as cdk
from aws_lambda_powertools import Logger

import common.constants as constants
from common.config import NetworkConfig
from networking.backend import BackendDescriptor, attach_backend
from networking.vpc_stack import compose

logger = Logger(
    service=constants.SERVICE_NAME, level=os.getenv("LOG_LEVEL", "INFO").upper()
)


def main() -> cdk.App:
    app = cdk.App()
    try:
        config = NetworkConfig.from_env()
        stack = compose(app, constants.STACK_ID, config)
        # S3 bucket for remote state
        attach_backend(stack, BackendDescriptor.from_config(config))
    except Exception:
        logger.exception("Failed to declare the network stack")
        raise

    app.synth()
    logger.info("Synthesized stack", stack=constants.STACK_ID, outdir=app.outdir)
    return app


if __name__ == "__main__":
    main()
