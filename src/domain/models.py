"""
Data models for the party domain.

These immutable value types define the contract every caller supplies to
the domain extractor.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

logger = logging.getLogger(__name__)

# Fixed business rule: guests of this age or older count as adults
ADULT_AGE = 18


class InvalidEmail(ValueError):
    """Raised when an email value has no usable '@' separator."""

    def __init__(self, value: str, reason: str):
        self.value = value
        super().__init__(f"Invalid email {value!r}: {reason}")


@dataclass(frozen=True, order=True)
class Email:
    """
    Email address wrapper validated at construction.

    Attributes:
        value: Full address text (must contain '@' followed by a domain)

    Raises:
        InvalidEmail: If the text is empty, has no '@', or ends with '@'
    """
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidEmail(str(self.value), "must be a string")
        if not self.value:
            raise InvalidEmail(self.value, "empty address")
        if '@' not in self.value:
            raise InvalidEmail(self.value, "missing '@' separator")
        if self.value.endswith('@'):
            raise InvalidEmail(self.value, "empty domain")

    @property
    def domain(self) -> str:
        """Text after the last '@'."""
        domain = self.value.rsplit('@', 1)[1]
        logger.debug(f"Domain resolved: email={self.value}, domain={domain}")
        return domain

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Person:
    """
    Party guest.

    Attributes:
        name: Display name
        age: Age in whole years (non-negative)
        email: Email address (plain strings are wrapped in Email)
    """
    name: str
    age: int
    email: Email

    def __post_init__(self) -> None:
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"Age of {self.name} must be an integer, got {self.age!r}")
        if self.age < 0:
            raise ValueError(f"Age of {self.name} must be non-negative, got {self.age}")
        if not isinstance(self.email, Email):
            # frozen dataclass, so bypass __setattr__
            object.__setattr__(self, 'email', Email(self.email))

    @property
    def is_adult(self) -> bool:
        """Check if the person meets the adult age threshold."""
        return self.age >= ADULT_AGE


@dataclass
class ExtractionResult:
    """
    Result of a domain extraction request.

    This explicit result type makes success/failure handling clear
    and keeps exceptions from crossing the handler boundary.

    Attributes:
        success: Whether extraction succeeded
        request_id: Invocation identifier
        domains: Sorted unique adult domains (empty on failure)
        person_count: Number of persons in the resolved roster
        error_message: Error description (if extraction failed)
        invalid_input: True when the failure was caused by bad caller data
    """
    success: bool
    request_id: str
    domains: List[str] = field(default_factory=list)
    person_count: int = 0
    error_message: Optional[str] = None
    invalid_input: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON body returned by the handler.

        Returns:
            Dict with requestId, domains and personCount, or error on failure
        """
        if not self.success:
            return {
                'requestId': self.request_id,
                'error': self.error_message,
            }
        return {
            'requestId': self.request_id,
            'domains': list(self.domains),
            'personCount': self.person_count,
        }

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return f"ExtractionResult(success=True, request_id={self.request_id}, domains={self.domains})"
        else:
            return f"ExtractionResult(success=False, request_id={self.request_id}, error={self.error_message})"
