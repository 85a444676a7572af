#!/usr/bin/env python3
"""
Command-line interface for querying CloudFormation templates locally.

Usage:
    python run_template_query.py template.yaml Resources/MyBucket/Type
    python run_template_query.py template.yaml "Resources/*|Type==AWS::S3::Bucket" --output-format json
    python run_template_query.py template.yaml "**/BucketName" --one --log-level DEBUG
    python run_template_query.py deployment.yaml --summary
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from src.cft import CftError, Node, Template, decode_node, state_summary, to_yaml
from src.utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find nodes in a CloudFormation template by path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Path syntax:
  Resources/MyBucket/Type             literal keys separated by /
  Resources/*/Type                    * matches every map entry or list element
  **/BucketName                       ** matches any number of levels
  Resources/*|Type==AWS::S3::Bucket   | attaches a filter checked on the candidate
        """
    )

    parser.add_argument("template_file", help="Path to the template file (YAML or JSON)")

    parser.add_argument("path", nargs="?", help="Path to match inside the template")

    parser.add_argument(
        "--one",
        action="store_true",
        help="Require exactly one match (exit 1 when there are none or several)"
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the deployment state summary instead of running a query"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--output-format",
        choices=["json", "pretty"],
        default="pretty",
        help="Output format for matches (default: pretty)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line query tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is None and not args.summary:
        parser.error("a path is required unless --summary is given")

    logger = setup_logging(args.log_level)

    try:
        template = Template.from_file(args.template_file)

        if args.summary:
            summary = state_summary(template)
            if args.output_format == "json":
                print(json.dumps(summary, indent=2, default=str))
            else:
                print_state_summary(summary)
            return 0

        logger.info(f"Matching path: {args.path}")

        if args.one:
            node = template.get_path(args.path)
            matches = [node] if node is not None else []
        else:
            matches = list(template.match_path(args.path))

        if args.output_format == "json":
            print(json.dumps([decode_node(node) for node in matches], indent=2, default=str))
        else:
            print_matches(matches)

        if not matches:
            logger.warning(f"No unique match for path '{args.path}'" if args.one else f"No match for path '{args.path}'")
            return 1
        return 0

    except (CftError, OSError) as e:
        logger.error(f"Error querying template: {str(e)}")
        print(f"ERROR: {str(e)}", file=sys.stderr)
        return 1


def format_node(node: Node) -> str:
    """Scalars print as their literal, anything else as YAML."""
    if node.is_scalar():
        return node.value
    return to_yaml(node).rstrip("\n")


def print_matches(matches: List[Node]) -> None:
    for node in matches:
        print(format_node(node))
        if not node.is_scalar():
            print("---")


def print_state_summary(summary: Dict[str, Any]) -> None:
    """Print a human-readable deployment state summary."""
    print("\n" + "="*60)
    print("DEPLOYMENT STATE")
    print("="*60)
    print(f"\nLocal path:       {summary['file_path']}")
    print(f"Last write time:  {summary['last_write_time']}")

    resources = summary.get("resources", [])
    print(f"\n=== Resources ({len(resources)}) ===")
    for res in resources:
        print(f"- {res['title']}")
    print("\n" + "="*60)


if __name__ == "__main__":
    sys.exit(main())
