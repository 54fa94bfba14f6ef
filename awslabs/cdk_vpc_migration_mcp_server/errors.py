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

"""Exception hierarchy for the CDK VPC migration MCP server."""

from typing import Optional


class VpcMigrationError(Exception):
    """Base exception for the VPC migration server."""

    def __init__(self, message: str, suggested_action: Optional[str] = None):
        """Initialize base exception.

        Args:
            message: Error message
            suggested_action: Suggested action to resolve the error
        """
        self.message = message
        self.suggested_action = suggested_action
        super().__init__(self.message)


class FileAccessError(VpcMigrationError):
    """Raised when an input file does not exist or cannot be read."""

    def __init__(self, file_path: str):
        """Initialize with the offending path."""
        self.file_path = file_path
        super().__init__(
            f'Error: File does not exist or is not accessible: {file_path}',
            suggested_action='Pass an absolute path to a readable CDK source file',
        )


class GuideNotConfiguredError(VpcMigrationError):
    """Raised when the migration guide is requested but no path is configured."""

    def __init__(self):
        """Initialize with a fixed message."""
        super().__init__(
            'No migration guide configured',
            suggested_action='Set VPC_MIGRATION_MIGRATION_GUIDE_PATH or pass --migration-guide',
        )
