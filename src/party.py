"""
Print the email domains of the adult guests of the demo party.

Usage:
    python src/party.py
"""

import logging
import sys

from domain.domain_extractor import adult_domains
from services.roster import build_party_roster

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s - %(message)s')

    persons = build_party_roster()
    domains = adult_domains(persons)
    logger.info(f"Party of {len(persons)} guest(s), {len(domains)} adult domain(s)")

    print(domains)
    return 0


if __name__ == '__main__':
    sys.exit(main())
