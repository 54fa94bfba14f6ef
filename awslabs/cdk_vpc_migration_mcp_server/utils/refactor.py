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

"""Best-effort text rewrites from the Vpc construct to the VpcV2 family.

Each rewrite is a regular expression substitution enabled by a keyword in the
migration approach. The output is not checked for syntactic validity.
"""

from awslabs.cdk_vpc_migration_mcp_server.consts import (
    ALPHA_MODULE,
    CIDR_ADDRESSES_PATTERN,
    IPAM_ADDRESSES_PATTERN,
    REQUIRED_IMPORTS,
    SUBNET_CONFIGURATION_PATTERN,
    VPC_CONSTRUCT_PATTERN,
)
from loguru import logger


# (approach keyword, pattern, replacement), applied in order
REWRITES = [
    ('Subnet', SUBNET_CONFIGURATION_PATTERN, r'new SubnetV2([\1])'),
    ('cidr', CIDR_ADDRESSES_PATTERN, r'primaryAddressBlock: IpAddresses.ipv4(\1)'),
    ('IPAM', IPAM_ADDRESSES_PATTERN, r'primaryAddressBlock: IpAddresses.ipv4Ipam(\1)'),
    ('VpcV2', VPC_CONSTRUCT_PATTERN, 'new VpcV2('),
]


def add_required_imports(code: str) -> str:
    """Prepend the VpcV2 import block unless the alpha module is already imported."""
    if ALPHA_MODULE in code:
        return code
    return '\n'.join(REQUIRED_IMPORTS) + '\n\n' + code


def refactor_vpc_code(cdk_code: str, migration_approach: str) -> str:
    """Rewrite CDK v1 VPC code according to the keywords in a migration approach.

    Args:
        cdk_code: Original CDK code
        migration_approach: Free text; `Subnet`, `cidr`, `IPAM` and `VpcV2`
            (case-sensitive) each enable one rewrite

    Returns:
        str: The rewritten code with the required imports
    """
    refactored_code = cdk_code
    for keyword, pattern, replacement in REWRITES:
        if keyword in migration_approach:
            refactored_code, count = pattern.subn(replacement, refactored_code)
            logger.debug(f'Applied {keyword} rewrite to {count} occurrence(s)')

    return add_required_imports(refactored_code)
