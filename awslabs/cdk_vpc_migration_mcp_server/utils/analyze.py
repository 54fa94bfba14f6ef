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

"""Detection of Vpc constructs in CDK source code.

The detection is a regular expression search, not a parse. The configuration
capture stops at the first `}` followed by `)`, so a configuration object that
contains nested objects is returned truncated.
"""

from awslabs.cdk_vpc_migration_mcp_server.consts import VPC_CONFIG_PATTERN, VPC_CONSTRUCT_PATTERN
from awslabs.cdk_vpc_migration_mcp_server.models import AnalysisResult
from awslabs.cdk_vpc_migration_mcp_server.utils.files import read_text_file
from loguru import logger
from typing import Optional


def extract_vpc_config(content: str) -> Optional[str]:
    """Return the first configuration object passed to a Vpc constructor."""
    config_match = VPC_CONFIG_PATTERN.search(content)
    if config_match and config_match.group(1):
        vpc_config = config_match.group(1).strip()
        logger.debug(f'Extracted VPC config: {vpc_config[:50]}...')
        return vpc_config
    return None


def analyze_vpc_code(content: str, file_path: str = '') -> AnalysisResult:
    """Count Vpc constructor calls in source text and extract the first configuration.

    Args:
        content: CDK source code
        file_path: Path reported back in the result

    Returns:
        AnalysisResult: Construct count, raw matches and extracted configuration
    """
    matches = VPC_CONSTRUCT_PATTERN.findall(content)
    vpc_count = len(matches)
    logger.debug(f'Found {vpc_count} VPC constructs')

    vpc_config = extract_vpc_config(content) if vpc_count > 0 else None

    return AnalysisResult(
        file=file_path,
        vpc_constructs=vpc_count,
        matches=matches,
        vpc_config=vpc_config,
        migration_ready=vpc_count > 0,
    )


def analyze_vpc_file(file_path: str) -> AnalysisResult:
    """Read a CDK source file and analyze it for Vpc constructs.

    Raises:
        FileAccessError: If the file does not exist or is not readable
    """
    content = read_text_file(file_path)
    return analyze_vpc_code(content, file_path)
