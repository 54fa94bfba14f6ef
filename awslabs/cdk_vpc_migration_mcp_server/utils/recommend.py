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

"""Canned migration recommendations keyed on substrings of the input code."""

from awslabs.cdk_vpc_migration_mcp_server.consts import (
    BASIC_MIGRATION_RECOMMENDATION,
    IP_ADDRESSING_RECOMMENDATION,
    SUBNET_RECOMMENDATIONS,
)
from awslabs.cdk_vpc_migration_mcp_server.models import RecommendationResult


def get_recommendations(cdk_code: str) -> RecommendationResult:
    """Suggest migration approaches for a CDK snippet.

    Subnet recommendations come first, then IP addressing. When neither
    applies a single basic recommendation is returned.
    """
    has_subnets = 'subnet' in cdk_code
    has_ip_addresses = 'cidr' in cdk_code or 'ipAddress' in cdk_code

    recommendations = []
    if has_subnets:
        recommendations.extend(SUBNET_RECOMMENDATIONS)
    if has_ip_addresses:
        recommendations.append(IP_ADDRESSING_RECOMMENDATION)
    if not recommendations:
        recommendations.append(BASIC_MIGRATION_RECOMMENDATION)

    return RecommendationResult(migration_approaches=recommendations)
