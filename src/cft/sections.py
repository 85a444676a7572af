"""
Names of the top-level sections of a CloudFormation template.
"""

AWS_TEMPLATE_FORMAT_VERSION = "AWSTemplateFormatVersion"
DESCRIPTION = "Description"
METADATA = "Metadata"
PARAMETERS = "Parameters"
RULES = "Rules"
MAPPINGS = "Mappings"
CONDITIONS = "Conditions"
TRANSFORM = "Transform"
RESOURCES = "Resources"
OUTPUTS = "Outputs"

# Written by deployments that keep their own state alongside the template
STATE = "State"
