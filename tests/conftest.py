"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src and hooks to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../hooks'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('TARGET_FUNCTION', 'party-domain-extractor-test')


@pytest.fixture
def party_records():
    """Roster records of the demo party."""
    return [
        {'name': 'Anna', 'age': 18, 'email': 'anna@nass.de'},
        {'name': 'Bernd', 'age': 17, 'email': 'bernd@bibel.de'},
        {'name': 'Caro', 'age': 25, 'email': 'caro@yahoo.de'},
        {'name': 'Dora', 'age': 49, 'email': 'dora@yahoo.de'},
        {'name': 'Edgar', 'age': 20, 'email': 'edgar@erdapfel.de'},
        {'name': 'Fritz', 'age': 5, 'email': 'fritz@email.de'},
    ]
