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

"""Pytest configuration and fixtures for the CDK VPC migration MCP server tests."""

import pytest


V1_VPC_CODE = """import * as ec2 from 'aws-cdk-lib/aws-ec2';

const vpc = new ec2.Vpc(this, 'MyVpc', {
  ipAddresses: ec2.IpAddresses.cidr('10.0.0.0/16'),
  natGateways: 1,
  maxAzs: 2,
  subnetConfiguration: [
    { name: 'public', subnetType: ec2.SubnetType.PUBLIC, cidrMask: 24 },
  ],
});
"""

V2_VPC_CODE = """import { VpcV2, SubnetV2, IpAddresses, IpCidr } from '@aws-cdk/aws-ec2-alpha';

const vpc = new VpcV2(this, 'MyVpc', {
  primaryAddressBlock: IpAddresses.ipv4('10.0.0.0/16'),
});

new SubnetV2(this, 'PublicSubnet', {
  vpc,
  availabilityZone: 'us-east-1a',
  ipv4CidrBlock: new IpCidr('10.0.0.0/24'),
  subnetType: SubnetType.PUBLIC,
});

vpc.addNatGateway({ subnet: publicSubnet });
"""


@pytest.fixture
def v1_vpc_code():
    """CDK code using the v1 Vpc construct."""
    return V1_VPC_CODE


@pytest.fixture
def v2_vpc_code():
    """A complete VpcV2 migration of `v1_vpc_code`."""
    return V2_VPC_CODE


@pytest.fixture
def cdk_file(tmp_path):
    """Write `V1_VPC_CODE` to a temporary file and return its path."""
    path = tmp_path / 'network-stack.ts'
    path.write_text(V1_VPC_CODE, encoding='utf-8')
    return path


@pytest.fixture
def guide_file(tmp_path):
    """Write a small migration guide and return its path."""
    path = tmp_path / 'vpc-migration-guide.md'
    path.write_text('# VPC Migration Guide\n\nUse VpcV2.\n', encoding='utf-8')
    return path
