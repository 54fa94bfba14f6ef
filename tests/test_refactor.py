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

"""Tests for the VpcV2 refactoring rewrites."""

from awslabs.cdk_vpc_migration_mcp_server.consts import REQUIRED_IMPORTS
from awslabs.cdk_vpc_migration_mcp_server.utils.refactor import (
    add_required_imports,
    refactor_vpc_code,
)


IMPORT_LINE = REQUIRED_IMPORTS[0]


class TestRefactorVpcCode:
    """Tests for refactor_vpc_code."""

    def test_subnet_rewrite(self):
        """`Subnet` turns a subnetConfiguration array into a SubnetV2 call."""
        code = "subnetConfiguration: [{ name: 'public' }]"

        result = refactor_vpc_code(code, 'Subnet Configuration')

        assert "new SubnetV2([{ name: 'public' }])" in result
        assert 'subnetConfiguration' not in result

    def test_cidr_rewrite(self):
        """`cidr` moves IpAddresses.cidr to primaryAddressBlock."""
        code = "ipAddresses: IpAddresses.cidr('10.0.0.0/16'),"

        result = refactor_vpc_code(code, 'migrate cidr')

        assert "primaryAddressBlock: IpAddresses.ipv4('10.0.0.0/16')," in result

    def test_cidr_rewrite_with_ec2_prefix(self):
        """The ec2 namespace prefix is dropped by the cidr rewrite."""
        code = "ipAddresses: ec2.IpAddresses.cidr('10.1.0.0/16')"

        result = refactor_vpc_code(code, 'cidr')

        assert "primaryAddressBlock: IpAddresses.ipv4('10.1.0.0/16')" in result
        assert 'ec2.IpAddresses' not in result

    def test_ipam_rewrite(self):
        """`IPAM` moves an IPAM allocation to primaryAddressBlock."""
        code = 'ipAddresses: IpAddresses.awsIpamAllocation({ ipv4IpamPoolId: pool.ref })'

        result = refactor_vpc_code(code, 'Use IPAM')

        assert 'primaryAddressBlock: IpAddresses.ipv4Ipam({ ipv4IpamPoolId: pool.ref })' in result

    def test_vpc_v2_rewrite(self):
        """`VpcV2` renames the constructor."""
        result = refactor_vpc_code("new ec2.Vpc(this, 'X', {})", 'Switch to VpcV2')

        assert "new VpcV2(this, 'X', {})" in result

    def test_keywords_are_case_sensitive(self):
        """A lowercase `subnet` approach leaves the code unchanged apart from imports."""
        code = "subnetConfiguration: [{ name: 'public' }]"

        result = refactor_vpc_code(code, 'subnet')

        assert result == f'{IMPORT_LINE}\n\n{code}'

    def test_rewrites_only_enabled_keywords(self, v1_vpc_code):
        """Only the rewrites named in the approach are applied."""
        result = refactor_vpc_code(v1_vpc_code, 'Subnet')

        assert 'new SubnetV2([' in result
        assert 'ec2.IpAddresses.cidr' in result
        assert 'new ec2.Vpc(' in result

    def test_full_refactor(self, v1_vpc_code):
        """All rewrites together produce VpcV2 code with the alpha import."""
        result = refactor_vpc_code(v1_vpc_code, 'Subnet, cidr and VpcV2')

        assert result.startswith(IMPORT_LINE + '\n\n')
        assert "new VpcV2(this, 'MyVpc', {" in result
        assert "primaryAddressBlock: IpAddresses.ipv4('10.0.0.0/16')" in result
        assert 'new SubnetV2([' in result

    def test_refactor_is_idempotent(self, v1_vpc_code):
        """Refactoring refactored code changes nothing and adds no second import."""
        approach = 'Subnet, cidr, IPAM and VpcV2'
        once = refactor_vpc_code(v1_vpc_code, approach)
        twice = refactor_vpc_code(once, approach)

        assert twice == once
        assert twice.count(IMPORT_LINE) == 1


class TestAddRequiredImports:
    """Tests for add_required_imports."""

    def test_adds_imports(self):
        """The import block is prepended with a blank line."""
        assert add_required_imports('const a = 1;') == f'{IMPORT_LINE}\n\nconst a = 1;'

    def test_existing_alpha_import(self):
        """Code already importing the alpha module is left alone."""
        code = "import { VpcV2 } from '@aws-cdk/aws-ec2-alpha';\nconst a = 1;"

        assert add_required_imports(code) == code
