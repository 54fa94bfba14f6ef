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

"""File reading helpers for the CDK VPC migration MCP server.

Resource readers in this module never raise: a failed read is reported as
text so the calling assistant sees the reason inline.
"""

import os
from awslabs.cdk_vpc_migration_mcp_server.errors import FileAccessError
from loguru import logger
from urllib.parse import unquote


def decode_resource_path(file_path: str) -> str:
    """Decode a percent-encoded path taken from a resource URI."""
    return unquote(file_path)


def read_text_file(file_path: str) -> str:
    """Read a file as UTF-8 text after checking that it is accessible.

    Args:
        file_path: Path to the file

    Returns:
        str: The file contents

    Raises:
        FileAccessError: If the path does not exist or is not readable
        OSError: If the read itself fails (e.g. the path is a directory)
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    if not file_path or not os.access(file_path, os.R_OK):
        raise FileAccessError(file_path)

    with open(file_path, 'r', encoding='utf-8') as f:
        content = f.read()
    logger.debug(f'File content length: {len(content)} bytes')
    return content


def read_cdk_file(file_path: str) -> str:
    """Return the contents of a CDK source file, or an inline error message.

    Args:
        file_path: Path to the file

    Returns:
        str: File contents, or `Error reading file: <reason>`
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f'Error reading file {file_path}: {e}')
        return f'Error reading file: {e}'
