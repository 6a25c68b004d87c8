"""
S3 operations utilities for the party domain extractor.

This module provides reusable functions for reading rosters from and
writing extraction results to Amazon S3.
"""

import logging
from contextlib import closing

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

# Configure S3 client with timeouts to prevent infinite hangs
s3_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,
    read_timeout=30
)

# Initialize S3 client at module level (thread-safe, reused across invocations)
s3_client = boto3.client('s3', config=s3_config)
logger.info("S3 client initialized with timeouts: connect=10s, read=30s, max_attempts=1")


def fetch_roster_from_s3(bucket: str, key: str) -> bytes:
    """
    Fetch a raw roster document from S3.

    Args:
        bucket: S3 bucket name
        key: S3 object key (path to the roster JSON)

    Returns:
        bytes: The raw roster content

    Raises:
        ValueError: If the bucket or object does not exist
        ClientError: For any other S3 failure

    Example:
        >>> raw = fetch_roster_from_s3(
        ...     bucket="party-rosters",
        ...     key="rosters/2025/summer.json"
        ... )
    """
    try:
        response = s3_client.get_object(Bucket=bucket, Key=key)
        with closing(response['Body']) as body:
            return body.read()
    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', '')
        if error_code == 'NoSuchKey':
            logger.error(f"S3 object not found: s3://{bucket}/{key}")
            raise ValueError(f"Roster file not found in S3: {key}") from e
        elif error_code == 'NoSuchBucket':
            logger.error(f"S3 bucket not found: {bucket}")
            raise ValueError(f"S3 bucket not found: {bucket}") from e
        else:
            logger.error(f"Failed to fetch from S3 s3://{bucket}/{key}: {e}")
            raise


def upload_domains_result(bucket: str, key: str, content: str) -> None:
    """
    Upload an extraction result to S3.

    Args:
        bucket: S3 bucket name
        key: S3 object key (path where to upload the file)
        content: JSON document as a string

    Raises:
        ClientError: If S3 operation fails
        ValueError: If parameters are invalid
    """
    if not bucket:
        raise ValueError("S3 bucket name cannot be empty")
    if not key:
        raise ValueError("S3 object key cannot be empty")
    if content is None:
        raise ValueError("Content cannot be None")

    try:
        logger.info(
            f"Uploading result to S3: bucket={bucket}, key={key}, "
            f"size={len(content)} bytes"
        )

        s3_client.put_object(
            Bucket=bucket,
            Key=key,
            Body=content.encode('utf-8'),
            ContentType='application/json'
        )

        logger.info(f"Successfully uploaded result to S3: bucket={bucket}, key={key}")

    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', 'Unknown')
        error_message = e.response.get('Error', {}).get('Message', str(e))

        logger.error(
            f"Failed to upload result to S3: "
            f"bucket={bucket}, key={key}, "
            f"error_code={error_code}, error_message={error_message}"
        )

        raise
