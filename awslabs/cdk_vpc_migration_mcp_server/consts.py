# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Constants for the CDK VPC migration MCP server.

This module defines the construct patterns, canned recommendation text and
import block shared by the migration tools.
"""

import re


# Server name
SERVER_NAME = 'cdk_vpc_migration_mcp_server'

# Fallback text used when the migration guide cannot be loaded
GUIDE_NOT_AVAILABLE = 'Migration guide not available'

# Construct instantiation, e.g. `new Vpc(` or `new ec2.Vpc(`
VPC_CONSTRUCT_PATTERN = re.compile(r'new\s+(?:ec2\.)?Vpc\s*\(')

# First configuration object passed to a Vpc constructor. Stops at the first
# `}` followed by `)`, so nested objects are truncated.
VPC_CONFIG_PATTERN = re.compile(r'new\s+(?:ec2\.)?Vpc\s*\([^{]*(\{\s*[\s\S]*?\}\s*)\)')

# Refactoring patterns
SUBNET_CONFIGURATION_PATTERN = re.compile(r'subnetConfiguration:\s*\[([^\]]+)\]')
CIDR_ADDRESSES_PATTERN = re.compile(r'ipAddresses:\s*(?:ec2\.)?IpAddresses\.cidr\(([^)]*)\)')
IPAM_ADDRESSES_PATTERN = re.compile(
    r'ipAddresses:\s*(?:ec2\.)?IpAddresses\.awsIpamAllocation\(([^)]*)\)'
)

# Import block added to refactored code
ALPHA_MODULE = '@aws-cdk/aws-ec2-alpha'
REQUIRED_IMPORTS = [
    f"import {{ VpcV2, SubnetV2, IpAddresses }} from '{ALPHA_MODULE}';",
]

# Recommendations
SUBNET_RECOMMENDATIONS = [
    'Subnet Configuration: define these subnet as new SubnetV2 with same availability zone, '
    'CIDR range and subnet type, pass in vpc as prop',
    'IPv4 CIDR block for subnet is defined using prop ipv4CidrBlock',
    'Ipv4 CIDR block to defined as new IpCidr(<ipaddress>)',
]
IP_ADDRESSING_RECOMMENDATION = (
    'IP Addressing: Migrate to property primaryAddressBlock: IpAddresses.ipv4(cidr)'
)
BASIC_MIGRATION_RECOMMENDATION = (
    'Basic VPC Migration: Use the updated VPC constructor with required parameters'
)

# Validation
STATUS_PASS = 'PASS'
STATUS_FAIL = 'FAIL'
SEVERITY_ERROR = 'Error'
SEVERITY_WARNING = 'Warning'
MIGRATION_SUCCESS_MESSAGE = (
    'Migration successful! Test your infrastructure code to ensure it works as expected.'
)

# Documentation references
VPC_V2_API_REFERENCE = 'https://docs.aws.amazon.com/cdk/api/v2/docs/aws-cdk-lib.aws_ec2.Vpc.html'
CDK_MIGRATION_GUIDE = 'https://docs.aws.amazon.com/cdk/v2/guide/migrating-v2.html'
