"""
Adult domain extraction - core business logic.

This module turns a party roster into the sorted set of email domains
used by adult guests:
1. Resolve the roster (inline event data, S3 document, or built-in party)
2. Filter to adults
3. Project to email domains, deduplicate and sort
4. Optionally upload the result to S3
5. Return result (success or failure)

All errors are caught and returned as ExtractionResult with success=False.
No exceptions propagate out of DomainExtractor.process_event.
"""

import json
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .models import ExtractionResult, Person
from services import roster as roster_service
from services import s3 as s3_service

logger = logging.getLogger(__name__)


def adult_domains(persons: Iterable[Person]) -> List[str]:
    """
    Return the sorted, unique email domains of adult persons.

    Args:
        persons: Person values in any order (iterated once)

    Returns:
        List of domains in ascending lexicographic order; empty if no adults

    Example:
        >>> adult_domains(roster_service.build_party_roster())
        ['erdapfel.de', 'nass.de', 'yahoo.de']
    """
    return sorted({p.email.domain for p in persons if p.is_adult})


class DomainExtractor:
    """
    Handles end-to-end adult domain extraction for a single request.

    The fallback roster and result destination are passed in at
    construction and never modified afterwards.
    """

    def __init__(
        self,
        default_roster: Sequence[Person] = (),
        results_bucket: Optional[str] = None,
        results_key_prefix: str = 'results/'
    ):
        self.default_roster = tuple(default_roster)
        self.results_bucket = results_bucket
        self.results_key_prefix = results_key_prefix

    def process_event(self, event: Dict[str, Any], request_id: str) -> ExtractionResult:
        """
        Extract adult domains for one invocation event.

        Args:
            event: Lambda event (may carry "persons" or "s3")
            request_id: Invocation identifier used for logging and result keys

        Returns:
            ExtractionResult with success=True or success=False (errors logged)
        """
        logger.info(f"Processing extraction request: {request_id}")
        start_time = time.time()

        try:
            persons = self._resolve_roster(event)
            domains = adult_domains(persons)
            logger.info(
                f"Extracted {len(domains)} domain(s) from {len(persons)} person(s) "
                f"in {time.time() - start_time:.3f}s"
            )

            self._store_result(request_id, domains)

            return ExtractionResult(
                success=True,
                request_id=request_id,
                domains=domains,
                person_count=len(persons)
            )

        except Exception as e:
            logger.error(f"Failed to process {request_id}: {e}", exc_info=True)

            return ExtractionResult(
                success=False,
                request_id=request_id,
                error_message=str(e),
                invalid_input=isinstance(e, ValueError)
            )

    def _resolve_roster(self, event: Dict[str, Any]) -> Sequence[Person]:
        """
        Pick the roster for this event.

        Priority: inline persons -> S3 document -> built-in roster

        Raises:
            ValueError: If the inline or S3 roster is malformed
        """
        if not isinstance(event, dict):
            raise ValueError(f"Event must be an object, got {type(event).__name__}")

        if 'persons' in event:
            records = event['persons']
            if not isinstance(records, list):
                raise ValueError("'persons' must be a list")
            logger.info(f"Using inline roster: {len(records)} record(s)")
            return roster_service.parse_roster(records)

        if 's3' in event:
            location = event['s3']
            if not isinstance(location, dict):
                raise ValueError("'s3' must be an object with 'bucket' and 'key'")
            bucket = location.get('bucket')
            key = location.get('key')
            if not bucket or not key:
                raise ValueError("'s3' requires both 'bucket' and 'key'")
            logger.info(f"Fetching roster from: s3://{bucket}/{key}")
            raw = s3_service.fetch_roster_from_s3(bucket, key)
            logger.info(f"Fetched {len(raw):,} bytes from S3")
            return roster_service.load_roster_json(raw)

        logger.info(f"Using built-in roster: {len(self.default_roster)} person(s)")
        return self.default_roster

    def _store_result(self, request_id: str, domains: List[str]) -> None:
        """Upload domains to the results bucket when configured."""
        if not self.results_bucket:
            logger.info("Result upload not configured, skipping")
            return

        key = f"{self.results_key_prefix}{request_id}.json"
        s3_service.upload_domains_result(
            self.results_bucket,
            key,
            json.dumps({'requestId': request_id, 'domains': domains})
        )
