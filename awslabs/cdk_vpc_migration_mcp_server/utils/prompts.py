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

"""Prompt templates handed to the calling assistant.

The server does not call a model. These prompts let the assistant perform the
analysis and refactoring itself when the text heuristics are not enough.
"""


def build_analysis_prompt(cdk_code: str) -> str:
    """Build a prompt asking for a structured analysis of VPC usage in CDK code."""
    return f"""You are an expert AWS CDK code analyzer. Analyze the following TypeScript/JavaScript code and identify all VPC-related constructs and configurations.

Focus on:
1. VPC constructs (new ec2.Vpc or new Vpc)
2. VPC imports (Vpc.fromVpcAttributes, Vpc.fromLookup)
3. Subnet configurations (subnetConfiguration property)
4. NAT Gateway configurations (natGateways property)
5. CIDR block configurations (cidr or cidrMask properties)
6. Availability Zone configurations (maxAzs property)
7. VPN Gateway configurations (enableVpnGateway method)
8. VPC Endpoint configurations (addGatewayEndpoint, addInterfaceEndpoint methods)

For each VPC construct found, extract the construct ID, the complete configuration object and its approximate position in the code.

Rate the complexity of migrating to VpcV2:
- Simple: basic VPC with minimal configuration
- Moderate: VPC with several subnet types
- Complex: VPC with VPN gateways or many VPC endpoints

Respond with a JSON object containing: vpcConstructs, vpcImports, totalVpcReferences, components (subnetConfigurations, natGateways, cidrBlocks, maxAzs, vpnGateways, vpcEndpoints), vpcConfigs (constructId, configBlock, position), subnetAnalysis (types, count), migrationComplexity and migrationReady.

Here's the code to analyze:

{cdk_code}
"""


def build_refactor_prompt(cdk_code: str, migration_approach: str, migration_guide: str) -> str:
    """Build a prompt asking for a full VpcV2 refactoring of CDK code.

    Args:
        cdk_code: Original CDK code
        migration_approach: Approach to apply, as chosen by the user
        migration_guide: Guide text, or a placeholder when none is available
    """
    return f"""You are an expert AWS CDK developer specializing in migrating VPC constructs to the VpcV2 constructs.

Refactor the following code to use the VpcV2 constructs.

Migration approach to apply: {migration_approach}

Here's the original code:

```typescript
{cdk_code}
```

Here's the migration guide for reference:

{migration_guide}

Key migration rules:
1. Replace 'new ec2.Vpc' with 'new VpcV2'
2. Replace the 'cidr' property with 'primaryAddressBlock: IpAddresses.ipv4()'
3. Replace the 'subnetConfiguration' array with explicit SubnetV2 constructs
4. Replace the 'natGateways' property with vpc.addNatGateway() method calls
5. Add explicit route tables and associate them with subnets
6. Add an explicit internet gateway with vpc.addInternetGateway() for public subnets
7. Import VpcV2, SubnetV2, IpAddresses, etc. from '@aws-cdk/aws-ec2-alpha'
8. Keep the same logical structure, variable names and functionality as the original code

Return ONLY the refactored code, including all import statements, without explanations.
"""
