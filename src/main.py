"""
AWS Lambda entry point for the CloudFormation template path query tool.
"""

import json

from .cft import CftError, Template, decode_node
from .config import load_config
from .utils import setup_logging


def _response(status_code: int, body: dict) -> dict:
    return {
        'statusCode': status_code,
        'body': json.dumps(body, default=str),
        'headers': {
            'Content-Type': 'application/json'
        }
    }


def query_handler(event: dict, context: object) -> dict:
    """
    AWS Lambda handler function.

    The event must carry a ``path``. The template is taken from the event's
    ``template`` text when present, otherwise from the file named by
    TEMPLATE_FILE_PATH, which is only required in that case.

    Args:
        event: Lambda event data
        context: Lambda context

    Returns:
        Dictionary with statusCode and body containing the matched nodes
    """
    logger = setup_logging()
    try:
        # Load and validate configuration
        config = load_config(require_template_path='template' not in event)

        # Setup logging
        logger = setup_logging(config.log_level)
        logger.info("Starting template path query")

        path = event.get('path')
        if path is None:
            raise ValueError("Event must contain a 'path'")

        if 'template' in event:
            template = Template.from_string(event['template'])
        else:
            template = Template.from_file(config.template_path)

        mode = event.get('mode', config.match_mode)
        if mode == 'one':
            node = template.get_path(path)
            matches = [node] if node is not None else []
        else:
            matches = list(template.match_path(path))

        logger.info(f"Query completed. Path '{path}' matched {len(matches)} node(s)")

        return _response(200, {
            'path': path,
            'count': len(matches),
            'matches': [decode_node(node) for node in matches],
        })

    except ValueError as e:
        # Configuration or validation errors
        logger.error(f"Configuration error: {str(e)}")
        return _response(400, {
            'error': 'Configuration error',
            'message': str(e)
        })

    except CftError as e:
        # Template could not be loaded or decoded
        logger.error(f"Template error: {str(e)}")
        return _response(422, {
            'error': 'Template error',
            'message': str(e)
        })

    except Exception as e:
        # Unexpected errors
        logger.error(f"Unexpected error: {str(e)}")
        return _response(500, {
            'error': 'Internal server error',
            'message': str(e)
        })
