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

"""Tests for config.py module."""

import pytest
from awslabs.cdk_vpc_migration_mcp_server.config import VpcMigrationServerConfig
from pathlib import Path
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the environment."""
    for name in (
        'VPC_MIGRATION_MIGRATION_GUIDE_PATH',
        'VPC_MIGRATION_LOG_LEVEL',
        'VPC_MIGRATION_LOG_FILE',
        'FASTMCP_LOG_LEVEL',
        'LOG_LEVEL',
    ):
        monkeypatch.delenv(name, raising=False)


class TestVpcMigrationServerConfig:
    """Test VpcMigrationServerConfig model."""

    def test_default_config(self):
        """Test config with defaults."""
        config = VpcMigrationServerConfig()
        assert config.migration_guide_path is None
        assert config.log_level == 'INFO'
        assert config.log_file is None

    def test_custom_config(self):
        """Test config with custom values."""
        config = VpcMigrationServerConfig(migration_guide_path='/tmp/guide.md')
        config.log_level = 'debug'
        assert config.migration_guide_path == Path('/tmp/guide.md')
        assert config.log_level == 'DEBUG'

    def test_critical_log_level_from_fastmcp_env(self, monkeypatch):
        """CRITICAL, accepted by FastMCP itself, is a valid level."""
        monkeypatch.setenv('FASTMCP_LOG_LEVEL', 'CRITICAL')
        assert VpcMigrationServerConfig().log_level == 'CRITICAL'

    def test_unprefixed_log_level_is_ignored(self, monkeypatch):
        """A generic LOG_LEVEL variable does not configure the server."""
        monkeypatch.setenv('LOG_LEVEL', 'critical')
        assert VpcMigrationServerConfig().log_level == 'INFO'

    def test_prefixed_log_level_wins_over_generic(self, monkeypatch):
        """VPC_MIGRATION_LOG_LEVEL is used even when LOG_LEVEL is also set."""
        monkeypatch.setenv('VPC_MIGRATION_LOG_LEVEL', 'WARNING')
        monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
        assert VpcMigrationServerConfig().log_level == 'WARNING'

    def test_prefixed_log_level_wins_over_fastmcp(self, monkeypatch):
        """VPC_MIGRATION_LOG_LEVEL takes precedence over FASTMCP_LOG_LEVEL."""
        monkeypatch.setenv('VPC_MIGRATION_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('FASTMCP_LOG_LEVEL', 'DEBUG')
        assert VpcMigrationServerConfig().log_level == 'ERROR'

    def test_guide_path_from_env(self, monkeypatch):
        """The guide path is read from the prefixed environment variable."""
        monkeypatch.setenv('VPC_MIGRATION_MIGRATION_GUIDE_PATH', '/opt/guide.md')
        assert VpcMigrationServerConfig().migration_guide_path == Path('/opt/guide.md')

    def test_log_level_from_fastmcp_env(self, monkeypatch):
        """FASTMCP_LOG_LEVEL is honoured and normalized to upper case."""
        monkeypatch.setenv('FASTMCP_LOG_LEVEL', 'debug')
        assert VpcMigrationServerConfig().log_level == 'DEBUG'

    def test_log_level_from_prefixed_env(self, monkeypatch):
        """VPC_MIGRATION_LOG_LEVEL is honoured."""
        monkeypatch.setenv('VPC_MIGRATION_LOG_LEVEL', 'WARNING')
        assert VpcMigrationServerConfig().log_level == 'WARNING'

    def test_invalid_log_level(self, monkeypatch):
        """Test validation error for an unknown log level."""
        monkeypatch.setenv('VPC_MIGRATION_LOG_LEVEL', 'VERBOSE')
        with pytest.raises(ValidationError):
            VpcMigrationServerConfig()

    def test_validate_assignment(self):
        """Assignments are validated."""
        config = VpcMigrationServerConfig()
        with pytest.raises(ValidationError):
            config.log_level = 'VERBOSE'
