DEFAULT_ENV = "dev"

# Naming convention components
SERVICE_NAME = "vpc-network"  # The application name
STACK_ID = "VPC"

# Environment variables recognised by NetworkConfig.from_env
ENV_REGION = "AWS_REGION"
ENV_VPC_CIDR = "VPC_CIDR"
ENV_PUBLIC_CIDR = "PUBLIC_CIDR"
ENV_PRIVATE_CIDR = "PRIVATE_CIDR"
ENV_VPC_AZ = "VPC_AZ"
ENV_ENVIRONMENT = "ENVIRONMENT"
ENV_STATE_BUCKET = "STATE_BUCKET"
ENV_STATE_KEY = "STATE_KEY"
ENV_STATE_REGION = "STATE_REGION"
ENV_STATE_ENCRYPT = "STATE_ENCRYPT"
ENV_STATE_KMS_KEY_ID = "STATE_KMS_KEY_ID"

DEFAULT_REGION = "us-east-1"
VPC_CIDR = "10.0.0.0/16"
PUBLIC_CIDR = "10.0.1.0/24"
PRIVATE_CIDR = "10.0.2.0/24"
VPC_AZ = "us-east-1a"

# CloudFormation parameter names
PARAM_REGION = "AwsRegion"
PARAM_VPC_CIDR = "VpcCidr"
PARAM_PUBLIC_CIDR = "PublicCidr"
PARAM_PRIVATE_CIDR = "PrivateCidr"
PARAM_VPC_AZ = "VpcAz"
PARAMETER_TYPE_STRING = "String"

# Checked by CloudFormation at deploy time, never parsed here
CIDR_PATTERN = r"^(\d{1,3}\.){3}\d{1,3}/(\d|[12]\d|3[0-2])$"
CIDR_CONSTRAINT = "Must be an IPv4 CIDR block such as 10.0.0.0/16"

VPC_INSTANCE_TENANCY = "default"

# Resource types (used in logical ids)
RESOURCE_VPC = "Vpc"
RESOURCE_SUBNET = "Subnet"
TIER_PRIVATE = "private"
TIER_PUBLIC = "public"

# Output names
OUTPUT_VPC_ID = "VpcId"
OUTPUT_VPC_ARN = "VpcArn"
OUTPUT_VPC_CIDR = "VpcCidrBlock"
OUTPUT_PRIVATE_SUBNET_ID = "PrivateSubnetId"
OUTPUT_PUBLIC_SUBNET_ID = "PublicSubnetId"

# Remote state
STATE_BUCKET = "s3-remote-state-20221018154517921000000001"
STATE_KEY = "cdktf-state/terraform.tfstate"
STATE_REGION = "us-east-1"
STATE_ENCRYPT = True
STATE_KMS_KEY_ID = "alias/terraform-bucket-key"
BACKEND_METADATA_KEY = "RemoteStateBackend"
