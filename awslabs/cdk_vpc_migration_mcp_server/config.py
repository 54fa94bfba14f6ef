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

"""Configuration management for the CDK VPC migration MCP server.

Uses Pydantic for type-safe configuration with environment variable support.
"""

from pathlib import Path
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional


class VpcMigrationServerConfig(BaseSettings):
    """Configuration for the CDK VPC migration MCP server."""

    model_config = SettingsConfigDict(
        env_prefix='VPC_MIGRATION_', case_sensitive=False, validate_assignment=True, extra='ignore'
    )

    migration_guide_path: Optional[Path] = Field(
        default=None,
        description='Path to a markdown migration guide served as a resource and embedded in prompts',
    )

    # Logging Configuration
    log_level: Literal['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = Field(
        default='INFO',
        validation_alias=AliasChoices('VPC_MIGRATION_LOG_LEVEL', 'FASTMCP_LOG_LEVEL'),
        description='Logging level',
    )
    log_file: Optional[Path] = Field(
        default=None, description='Optional log file, rotated at 10 MB'
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v
