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

"""Pydantic models for the CDK VPC migration MCP server.

Field aliases carry the camelCase keys that tool responses expose to the
calling assistant. Use `to_json()` to render a model as a tool response.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


class _ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> str:
        """Serialize with aliases and two-space indentation."""
        return self.model_dump_json(by_alias=True, indent=2)


class AnalysisResult(_ResponseModel):
    """Result of scanning a CDK source file for VPC constructs."""

    file: str = Field(..., description='Path of the analyzed file')
    vpc_constructs: int = Field(
        ..., alias='vpcConstructs', description='Number of Vpc constructor calls found'
    )
    matches: List[str] = Field(
        default_factory=list, description='Raw text of each constructor match'
    )
    vpc_config: Optional[str] = Field(
        default=None,
        alias='config',
        description='First configuration object passed to a Vpc constructor, if extracted',
    )
    migration_ready: bool = Field(
        ..., alias='migrationReady', description='Whether the file has anything to migrate'
    )


class RecommendationResult(_ResponseModel):
    """Migration approaches suggested for a code snippet."""

    migration_approaches: List[str] = Field(..., alias='migrationApproaches')


class ValidationIssue(_ResponseModel):
    """A single problem found when comparing original and migrated code."""

    issue: str
    severity: Literal['Error', 'Warning']
    recommendation: str


class ValidationReport(_ResponseModel):
    """Aggregate result of a migration validation."""

    status: Literal['PASS', 'FAIL']
    issues: List[ValidationIssue] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
