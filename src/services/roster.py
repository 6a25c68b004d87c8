"""
Roster utilities for the party domain extractor.

Turns raw roster payloads (JSON bytes or lists of dicts) into immutable
Person tuples, and builds the demo party roster.
"""

import json
import logging
from typing import Any, Dict, Iterable, Tuple

from domain.models import Person

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'age', 'email')


def parse_roster(records: Iterable[Dict[str, Any]]) -> Tuple[Person, ...]:
    """
    Convert roster records into Person values.

    Args:
        records: Iterable of dicts with name, age and email keys

    Returns:
        Tuple of Person in input order

    Raises:
        ValueError: If a record is not a dict or misses a required field
        InvalidEmail: If a record carries an email without '@'

    Example:
        >>> parse_roster([{"name": "Anna", "age": 18, "email": "anna@nass.de"}])
        (Person(name='Anna', age=18, email=Email(value='anna@nass.de')),)
    """
    persons = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Roster record {index} must be an object, got {type(record).__name__}")

        missing = [name for name in REQUIRED_FIELDS if name not in record]
        if missing:
            raise ValueError(f"Roster record {index} missing field(s): {', '.join(missing)}")

        persons.append(Person(
            name=record['name'],
            age=record['age'],
            email=record['email']
        ))

    logger.info(f"Parsed roster: {len(persons)} person(s)")
    return tuple(persons)


def load_roster_json(raw: bytes) -> Tuple[Person, ...]:
    """
    Decode a JSON roster document.

    Accepts either a top-level list of records or an object with a
    "persons" list.

    Args:
        raw: UTF-8 encoded JSON

    Returns:
        Tuple of Person

    Raises:
        ValueError: If the document is not valid JSON or has the wrong shape
    """
    try:
        document = json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Roster is not valid JSON: {e}") from e

    if isinstance(document, dict) and isinstance(document.get('persons'), list):
        records = document['persons']
    elif isinstance(document, list):
        records = document
    else:
        raise ValueError("Roster must be a list or an object with a 'persons' list")

    return parse_roster(records)


def build_party_roster() -> Tuple[Person, ...]:
    """Build the guest list of the demo party."""
    return (
        Person("Anna", 18, "anna@nass.de"),
        Person("Bernd", 17, "bernd@bibel.de"),
        Person("Caro", 25, "caro@yahoo.de"),
        Person("Dora", 49, "dora@yahoo.de"),
        Person("Edgar", 20, "edgar@erdapfel.de"),
        Person("Fritz", 5, "fritz@email.de"),
    )
