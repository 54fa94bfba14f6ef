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

"""Checklist validation of a migrated VPC definition against the original."""

from awslabs.cdk_vpc_migration_mcp_server.consts import (
    MIGRATION_SUCCESS_MESSAGE,
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    STATUS_FAIL,
    STATUS_PASS,
)
from awslabs.cdk_vpc_migration_mcp_server.models import ValidationIssue, ValidationReport
from typing import List


def validate_migration(original_code: str, migrated_code: str) -> ValidationReport:
    """Compare original and migrated code against a fixed checklist.

    Args:
        original_code: CDK code using the Vpc construct
        migrated_code: CDK code expected to use VpcV2

    Returns:
        ValidationReport: `PASS` when no issue was recorded, otherwise `FAIL`
        with one recommendation per issue
    """
    issues: List[ValidationIssue] = []

    if 'VpcV2' not in migrated_code:
        issues.append(
            ValidationIssue(
                issue='Missing VpcV2 construct',
                severity=SEVERITY_ERROR,
                recommendation='Replace Vpc with VpcV2 from @aws-cdk/aws-ec2-alpha',
            )
        )

    if 'cidrMask' in original_code and 'primaryAddressBlock' not in migrated_code:
        issues.append(
            ValidationIssue(
                issue='IP addressing not properly migrated',
                severity=SEVERITY_ERROR,
                recommendation='Use primaryAddressBlock: IpAddresses.ipv4() instead of cidrMask',
            )
        )

    if 'subnetConfiguration' in original_code and 'SubnetV2' not in migrated_code:
        issues.append(
            ValidationIssue(
                issue='Subnet configuration not properly migrated',
                severity=SEVERITY_WARNING,
                recommendation='Use SubnetV2 constructs instead of subnetConfiguration array',
            )
        )

    if 'natGateways' in original_code and 'addNatGateway' not in migrated_code:
        issues.append(
            ValidationIssue(
                issue='NAT gateway configuration not properly migrated',
                severity=SEVERITY_WARNING,
                recommendation='Use vpc.addNatGateway() method instead of natGateways property',
            )
        )

    if not issues:
        return ValidationReport(
            status=STATUS_PASS, issues=[], recommendations=[MIGRATION_SUCCESS_MESSAGE]
        )
    return ValidationReport(
        status=STATUS_FAIL,
        issues=issues,
        recommendations=[issue.recommendation for issue in issues],
    )
