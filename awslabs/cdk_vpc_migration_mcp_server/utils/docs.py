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

"""Markdown documentation for a completed VPC migration."""

from awslabs.cdk_vpc_migration_mcp_server.consts import CDK_MIGRATION_GUIDE, VPC_V2_API_REFERENCE
from typing import List


# (marker in original, marker in migrated, change description)
CHANGE_RULES = [
    ('Vpc', 'VpcV2', 'Upgraded from Vpc to VpcV2 construct'),
    ('cidrMask', 'primaryAddressBlock', 'Migrated CIDR configuration to use primaryAddressBlock'),
    (
        'subnetConfiguration',
        'SubnetV2',
        'Replaced subnetConfiguration array with explicit SubnetV2 constructs',
    ),
    (
        'natGateways',
        'addNatGateway',
        'Replaced natGateways property with addNatGateway() method calls',
    ),
]


def detect_changes(original_code: str, migrated_code: str) -> List[str]:
    """List the migration changes evident from the two snippets."""
    return [
        change
        for original_marker, migrated_marker, change in CHANGE_RULES
        if original_marker in original_code and migrated_marker in migrated_code
    ]


def generate_migration_docs(original_code: str, migrated_code: str) -> str:
    """Render migration documentation as markdown.

    Both snippets are embedded verbatim in fenced code blocks.
    """
    changes = '\n'.join(f'- {change}' for change in detect_changes(original_code, migrated_code))

    return f"""
# VPC Migration Documentation

## Changes Applied

{changes}

## Migration Details

### Original Code
```typescript
{original_code}
```

### Migrated Code
```typescript
{migrated_code}
```

## Testing Recommendations

1. Deploy the migrated infrastructure to a test environment
2. Verify network connectivity between subnets
3. Validate that internet connectivity works as expected
4. Check that any resources depending on the VPC can still connect properly

## References

- [AWS CDK VpcV2 API Reference]({VPC_V2_API_REFERENCE})
- [AWS CDK Migration Guide]({CDK_MIGRATION_GUIDE})
"""
