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

"""CDK VPC migration MCP server.

This module registers the migration tools, resources and prompts on a FastMCP
server and runs it over stdio.

Note: The tools match text with regular expressions and templates. They are a
starting point for the calling assistant, not a semantic rewrite of CDK code.
"""

import argparse
import sys
from awslabs.cdk_vpc_migration_mcp_server.config import VpcMigrationServerConfig
from awslabs.cdk_vpc_migration_mcp_server.consts import SERVER_NAME
from awslabs.cdk_vpc_migration_mcp_server.errors import FileAccessError, VpcMigrationError
from awslabs.cdk_vpc_migration_mcp_server.static import MCP_INSTRUCTIONS
from awslabs.cdk_vpc_migration_mcp_server.utils.analyze import analyze_vpc_file
from awslabs.cdk_vpc_migration_mcp_server.utils.docs import generate_migration_docs
from awslabs.cdk_vpc_migration_mcp_server.utils.files import decode_resource_path, read_cdk_file
from awslabs.cdk_vpc_migration_mcp_server.utils.guide import (
    load_migration_guide,
    read_migration_guide,
)
from awslabs.cdk_vpc_migration_mcp_server.utils.prompts import (
    build_analysis_prompt,
    build_refactor_prompt,
)
from awslabs.cdk_vpc_migration_mcp_server.utils.recommend import get_recommendations
from awslabs.cdk_vpc_migration_mcp_server.utils.refactor import refactor_vpc_code
from awslabs.cdk_vpc_migration_mcp_server.utils.validate import validate_migration
from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pathlib import Path
from pydantic import Field


server_config = VpcMigrationServerConfig()


def configure_logging(config: VpcMigrationServerConfig) -> None:
    """Route loguru output to stderr and, if configured, a rotating log file.

    stdout carries the protocol, so nothing may be logged there.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.log_level,
        format='{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}',
    )
    if config.log_file:
        logger.add(
            config.log_file,
            rotation='10 MB',
            retention=7,
            level=config.log_level,
            format='{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}',
        )


configure_logging(server_config)

mcp = FastMCP(SERVER_NAME, instructions=MCP_INSTRUCTIONS)


# * Resources
@mcp.resource(
    uri='cdk-files://file/{file_path}',
    name='cdk-files',
    description='Contents of a local CDK source file. The path must be percent-encoded.',
    mime_type='text/plain',
)
async def cdk_files(file_path: str) -> str:
    """Read a CDK source file.

    A failed read is returned as text starting with `Error reading file:`
    instead of being raised.
    """
    path = decode_resource_path(file_path)
    logger.info('resource: cdk-files')
    logger.info(f'resource-args: file_path={path}')
    return read_cdk_file(path)


@mcp.resource(
    uri='vpc-migration://guide',
    name='migration-guide',
    description='The configured Vpc to VpcV2 migration guide',
    mime_type='text/markdown',
)
async def migration_guide() -> str:
    """Return the configured migration guide, or an inline error."""
    logger.info('resource: migration-guide')
    try:
        return read_migration_guide(server_config.migration_guide_path)
    except (VpcMigrationError, OSError, UnicodeDecodeError) as e:
        logger.warning(f'Error reading migration guide: {e}')
        return f'Error reading migration guide: {e}'


def text_result(text: str) -> CallToolResult:
    """Wrap tool output in a successful result."""
    return CallToolResult(isError=False, content=[TextContent(type='text', text=text)])


def error_result(error_message: str) -> CallToolResult:
    """Wrap an error message in an error-flagged result."""
    return CallToolResult(isError=True, content=[TextContent(type='text', text=error_message)])


# * Tools
@mcp.tool(name='analyze-vpc')
async def analyze_vpc(
    filePath: str = Field(..., description='Absolute Path to the CDK file to analyze'),
) -> CallToolResult:
    """Analyzes CDK code to identify VPC constructs and their configurations.

    Counts `new Vpc(...)` / `new ec2.Vpc(...)` calls in the file and extracts the first
    configuration object. Nested objects inside the configuration are truncated.

    Returns:
        CallToolResult: JSON with keys file, vpcConstructs, matches, config and migrationReady
    """
    logger.info('tool-name: analyze-vpc')
    logger.info(f'tool-args: filePath={filePath}')

    try:
        result = analyze_vpc_file(filePath)
    except FileAccessError as e:
        logger.error(f'File access error: {e}')
        return error_result(e.message)
    except Exception as e:
        error_message = f'Error analyzing file: {str(e)}'
        logger.exception(error_message)
        return error_result(error_message)

    logger.debug(f'Analysis complete: {result.model_dump_json(by_alias=True)}')
    return text_result(result.to_json())


@mcp.tool(name='get-vpc-migration-recommendations')
async def get_vpc_migration_recommendations(
    cdkCode: str = Field(..., description='CDK code snippet containing VPC construct'),
) -> CallToolResult:
    """Provides recommendations for migrating VPC constructs from CDK v1 to v2.

    Returns:
        CallToolResult: JSON with a migrationApproaches list
    """
    logger.info('tool-name: get-vpc-migration-recommendations')

    try:
        result = get_recommendations(cdkCode)
    except Exception as e:
        error_message = f'Error generating recommendations: {str(e)}'
        logger.exception(error_message)
        return error_result(error_message)

    logger.debug(f'Recommendations: {result.migration_approaches}')
    return text_result(result.to_json())


@mcp.tool(name='refactor-vpc')
async def refactor_vpc(
    cdkCode: str = Field(..., description='Original CDK code with VPC construct'),
    migrationApproach: str = Field(..., description='Migration approach to apply'),
) -> CallToolResult:
    """Refactors CDK v1 VPC code to use CDK v2 VPC constructs.

    The approach text selects the rewrites: `Subnet` turns subnetConfiguration arrays into
    SubnetV2 calls, `cidr` and `IPAM` move ipAddresses to primaryAddressBlock, and `VpcV2`
    renames the constructor. The VpcV2 import is added once.

    Returns:
        CallToolResult: The refactored code
    """
    logger.info('tool-name: refactor-vpc')
    logger.info(f'tool-args: migrationApproach={migrationApproach}')

    try:
        return text_result(refactor_vpc_code(cdkCode, migrationApproach))
    except Exception as e:
        error_message = f'Error refactoring code: {str(e)}'
        logger.exception(error_message)
        return error_result(error_message)


@mcp.tool(name='validate-vpc-migration')
async def validate_vpc_migration(
    originalCode: str = Field(..., description='Original CDK code with VPC construct'),
    migratedCode: str = Field(..., description='Migrated CDK code with VpcV2 construct'),
) -> CallToolResult:
    """Validates the correctness of a VPC migration from CDK v1 to v2.

    Returns:
        CallToolResult: JSON with status (PASS or FAIL), issues and recommendations
    """
    logger.info('tool-name: validate-vpc-migration')

    try:
        report = validate_migration(originalCode, migratedCode)
    except Exception as e:
        error_message = f'Error validating migration: {str(e)}'
        logger.exception(error_message)
        return error_result(error_message)

    logger.debug(f'Validation status: {report.status}, {len(report.issues)} issue(s)')
    return text_result(report.to_json())


@mcp.tool(name='generate-migration-docs')
async def generate_migration_docs_tool(
    originalCode: str = Field(..., description='Original CDK code with VPC construct'),
    migratedCode: str = Field(..., description='Migrated CDK code with VpcV2 construct'),
) -> CallToolResult:
    """Generates documentation for a VPC migration from CDK v1 to v2.

    Returns:
        CallToolResult: Markdown with the applied changes, both code versions, testing steps
        and references
    """
    logger.info('tool-name: generate-migration-docs')

    try:
        return text_result(generate_migration_docs(originalCode, migratedCode))
    except Exception as e:
        error_message = f'Error generating documentation: {str(e)}'
        logger.exception(error_message)
        return error_result(error_message)


# * Prompts
@mcp.prompt(
    name='vpc-analysis-prompt',
    description='Ask the assistant for a structured analysis of VPC usage in CDK code',
)
def vpc_analysis_prompt(cdkCode: str) -> str:
    """Build the VPC analysis prompt."""
    logger.info('prompt: vpc-analysis-prompt')
    return build_analysis_prompt(cdkCode)


@mcp.prompt(
    name='vpc-refactor-prompt',
    description='Ask the assistant to refactor CDK code to VpcV2 using the migration guide',
)
def vpc_refactor_prompt(cdkCode: str, migrationApproach: str) -> str:
    """Build the VPC refactoring prompt, embedding the migration guide when available."""
    logger.info('prompt: vpc-refactor-prompt')
    guide = load_migration_guide(server_config.migration_guide_path)
    return build_refactor_prompt(cdkCode, migrationApproach, guide)


def main() -> None:
    """Run the MCP server."""
    parser = argparse.ArgumentParser(
        description='An AWS Labs Model Context Protocol (MCP) server for migrating CDK VPC constructs to VpcV2'
    )
    parser.add_argument(
        '--migration-guide',
        type=Path,
        default=None,
        help='Path to a markdown migration guide (overrides VPC_MIGRATION_MIGRATION_GUIDE_PATH)',
    )
    parser.add_argument(
        '--log-level',
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='Logging level (overrides VPC_MIGRATION_LOG_LEVEL)',
    )
    parser.add_argument('--sse', action='store_true', help='Use SSE transport')
    parser.add_argument('--port', type=int, default=8888, help='Port to run the server on')
    args = parser.parse_args()

    if args.migration_guide is not None:
        server_config.migration_guide_path = args.migration_guide
    if args.log_level is not None:
        server_config.log_level = args.log_level
    configure_logging(server_config)

    try:
        if args.sse:
            mcp.settings.port = args.port
            logger.info(f'Starting CDK VPC migration MCP server on SSE port {args.port}')
            mcp.run(transport='sse')
        else:
            logger.info('Starting CDK VPC migration MCP server on stdio')
            mcp.run(transport='stdio')
    except Exception as e:
        logger.critical(f'Fatal error in main(): {e}')
        sys.exit(1)


if __name__ == '__main__':  # pragma: no cover
    main()
