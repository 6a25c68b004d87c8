"""
Tests for the party command-line entry point.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

import party


def test_main_prints_adult_domains(capsys):
    """Test main prints the demo party domains."""
    exit_code = party.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "['erdapfel.de', 'nass.de', 'yahoo.de']\n"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
