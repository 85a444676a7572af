"""
Tests for the deployment state summary.
"""

import unittest
from pathlib import Path

from src.cft import NodeNotFoundError, SectionNotFoundError, Template, state_summary

FIXTURES = Path(__file__).parent / "fixtures"


class TestStateSummary(unittest.TestCase):
    """Tests for state_summary()."""

    def test_summary(self) -> None:
        """Test the summary of the deployment fixture."""
        summary = state_summary(Template.from_file(FIXTURES / "deployment.yaml"))

        self.assertEqual(summary["file_path"], "/home/user/stacks/app.yaml")
        self.assertEqual(summary["last_write_time"], "2024-05-01T12:30:00Z")
        self.assertEqual(len(summary["resources"]), 2)

        bucket, queue = summary["resources"]
        self.assertEqual(bucket["resource_name"], "Bucket")
        self.assertEqual(bucket["title"], "Bucket (AWS::S3::Bucket my-bucket)")
        self.assertEqual(bucket["model"], {"BucketName": "my-bucket", "Tags": [{"Key": "env", "Value": "dev"}]})
        self.assertEqual(queue["resource_type"], "AWS::SQS::Queue")
        self.assertEqual(queue["model"]["VisibilityTimeout"], 30)

    def test_missing_state_section(self) -> None:
        """Test that a template without State raises SectionNotFoundError."""
        template = Template.from_string("Resources:\n  A:\n    Type: X\n")
        with self.assertRaises(SectionNotFoundError):
            state_summary(template)

    def test_resource_without_model(self) -> None:
        """Test that a resource with no stored model is reported by name."""
        template = Template.from_string(
            """
Resources:
  A:
    Type: X
  B:
    Type: Y
State:
  FilePath: t.yaml
  LastWriteTime: now
  ResourceModels:
    A:
      Identifier: a-1
      Model: {}
"""
        )
        with self.assertRaises(NodeNotFoundError) as context:
            state_summary(template)
        self.assertEqual(context.exception.name, "B")

    def test_model_without_identifier(self) -> None:
        """Test that a model without Identifier raises NodeNotFoundError."""
        template = Template.from_string(
            """
Resources:
  A:
    Type: X
State:
  FilePath: t.yaml
  LastWriteTime: now
  ResourceModels:
    A:
      Model: {}
"""
        )
        with self.assertRaises(NodeNotFoundError) as context:
            state_summary(template)
        self.assertEqual(context.exception.name, "Identifier")


if __name__ == "__main__":
    unittest.main()
