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

"""Loading of the optional migration guide document."""

from awslabs.cdk_vpc_migration_mcp_server.consts import GUIDE_NOT_AVAILABLE
from awslabs.cdk_vpc_migration_mcp_server.errors import GuideNotConfiguredError
from loguru import logger
from pathlib import Path
from typing import Optional


def read_migration_guide(guide_path: Optional[Path]) -> str:
    """Read the migration guide.

    Raises:
        GuideNotConfiguredError: If no guide path is configured
        OSError: If the guide cannot be read
        UnicodeDecodeError: If the guide is not valid UTF-8
    """
    if guide_path is None:
        raise GuideNotConfiguredError()
    return Path(guide_path).read_text(encoding='utf-8')


def load_migration_guide(guide_path: Optional[Path]) -> str:
    """Return the migration guide text, or a placeholder if it cannot be read."""
    try:
        content = read_migration_guide(guide_path)
    except (GuideNotConfiguredError, OSError, UnicodeDecodeError) as e:
        logger.warning(f'Error loading migration guide: {e}')
        return GUIDE_NOT_AVAILABLE
    logger.debug('Migration guide loaded successfully')
    return content
