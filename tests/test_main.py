"""
Tests for the Lambda query handler.
"""

import json
import unittest
from pathlib import Path
from unittest.mock import patch

from src.main import query_handler

FIXTURE = str(Path(__file__).parent / "fixtures" / "deployment.yaml")


class TestQueryHandler(unittest.TestCase):
    """Tests for query_handler()."""

    @patch.dict("os.environ", {"TEMPLATE_FILE_PATH": FIXTURE}, clear=True)
    def test_query_configured_file(self) -> None:
        """Test querying the template file named in the environment."""
        response = query_handler({"path": "Resources/*/Type"}, None)
        self.assertEqual(response["statusCode"], 200)
        body = json.loads(response["body"])
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["matches"], ["AWS::S3::Bucket", "AWS::SQS::Queue"])

    @patch.dict("os.environ", {"TEMPLATE_FILE_PATH": FIXTURE}, clear=True)
    def test_query_inline_template(self) -> None:
        """Test that an inline template takes precedence over the file."""
        event = {"path": "Resources/A/Properties", "template": "Resources:\n  A:\n    Properties: {Size: 5}\n"}
        body = json.loads(query_handler(event, None)["body"])
        self.assertEqual(body["matches"], [{"Size": 5}])

    @patch.dict("os.environ", {}, clear=True)
    def test_query_inline_template_without_file_configured(self) -> None:
        """Test that an inline template works with no template file configured."""
        event = {"path": "a", "template": "a: b\n"}
        response = query_handler(event, None)
        self.assertEqual(response["statusCode"], 200)
        self.assertEqual(json.loads(response["body"])["matches"], ["b"])

    @patch.dict("os.environ", {"TEMPLATE_FILE_PATH": FIXTURE, "MATCH_MODE": "one"}, clear=True)
    def test_query_single_match_mode(self) -> None:
        """Test that single match mode returns nothing for ambiguous paths."""
        body = json.loads(query_handler({"path": "Resources/*/Type"}, None)["body"])
        self.assertEqual(body["count"], 0)
        body = json.loads(query_handler({"path": "Resources/Queue/Type"}, None)["body"])
        self.assertEqual(body["matches"], ["AWS::SQS::Queue"])

    @patch.dict("os.environ", {}, clear=True)
    def test_binary_value_is_returned_as_text(self) -> None:
        """Test that values JSON cannot encode natively still produce a 200."""
        event = {"path": "a", "template": "a: !!binary aGVsbG8=\n"}
        response = query_handler(event, None)
        self.assertEqual(response["statusCode"], 200)
        self.assertEqual(json.loads(response["body"])["matches"], ["b'hello'"])

    @patch.dict("os.environ", {"TEMPLATE_FILE_PATH": FIXTURE}, clear=True)
    def test_missing_path(self) -> None:
        """Test that an event without a path is a 400."""
        response = query_handler({}, None)
        self.assertEqual(response["statusCode"], 400)

    @patch.dict("os.environ", {}, clear=True)
    def test_missing_configuration(self) -> None:
        """Test that a file-based query without TEMPLATE_FILE_PATH is a 400."""
        response = query_handler({"path": "Resources"}, None)
        self.assertEqual(response["statusCode"], 400)
        self.assertIn("TEMPLATE_FILE_PATH", json.loads(response["body"])["message"])

    @patch.dict("os.environ", {"TEMPLATE_FILE_PATH": FIXTURE}, clear=True)
    def test_invalid_template(self) -> None:
        """Test that malformed template text is a 422."""
        response = query_handler({"path": "a", "template": "a: [b"}, None)
        self.assertEqual(response["statusCode"], 422)

    @patch.dict("os.environ", {"TEMPLATE_FILE_PATH": "/nonexistent/template.yaml"}, clear=True)
    def test_unreadable_file(self) -> None:
        """Test that a missing template file is a 500."""
        response = query_handler({"path": "Resources"}, None)
        self.assertEqual(response["statusCode"], 500)


if __name__ == "__main__":
    unittest.main()
