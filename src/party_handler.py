"""
AWS Lambda handler for extracting the email domains of adult party guests.

Thin orchestration layer that delegates to DomainExtractor.
"""

import json
import logging
import os
from typing import Dict, Any

from domain.domain_extractor import DomainExtractor
from services import roster as roster_service

# Environment variables
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    # unknown level names fall back to INFO
    LOG_LEVEL = 'INFO'
RESULTS_BUCKET = os.environ.get('RESULTS_BUCKET')
RESULTS_KEY_PREFIX = os.environ.get('RESULTS_KEY_PREFIX', 'results/')

# Configure logging
logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Built once at cold start and reused across invocations
domain_extractor = DomainExtractor(
    default_roster=roster_service.build_party_roster(),
    results_bucket=RESULTS_BUCKET,
    results_key_prefix=RESULTS_KEY_PREFIX
)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Return the adult email domains for a party roster.

    Expected event format (all keys optional):
    {
        "persons": [{"name": "Anna", "age": 18, "email": "anna@nass.de"}],
        "s3": {"bucket": "party-rosters", "key": "rosters/summer.json"}
    }

    Args:
        event: Lambda event
        context: Lambda context

    Returns:
        Dict with statusCode, headers and JSON body
    """
    logger.info("=" * 70)
    logger.info(f"Party Domain Extractor - Started (environment: {ENVIRONMENT})")
    logger.info("=" * 70)

    request_id = getattr(context, 'aws_request_id', None) or 'local'
    result = domain_extractor.process_event({} if event is None else event, request_id)

    if result.success:
        status_code = 200
        logger.info(f"✓ Extracted domains for request {request_id}: {result.domains}")
    elif result.invalid_input:
        status_code = 400
        logger.warning(f"⚠ Rejected request {request_id}: {result.error_message}")
    else:
        status_code = 500
        logger.warning(f"⚠ Request {request_id} failed with ERRORS: {result.error_message}")

    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json'
        },
        'body': json.dumps(result.to_dict())
    }


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return {
        'statusCode': 200,
        'body': json.dumps({
            'status': 'healthy',
            'environment': ENVIRONMENT,
            'resultsConfigured': bool(RESULTS_BUCKET)
        })
    }
