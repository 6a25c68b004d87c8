"""
Tests for roster service.
"""

import json

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.models import Email, InvalidEmail, Person
from services import roster


class TestParseRoster:
    """Test conversion of records into persons."""

    def test_parse_roster(self, party_records):
        """Test records become Person values in order."""
        persons = roster.parse_roster(party_records)

        assert isinstance(persons, tuple)
        assert len(persons) == 6
        assert persons[0] == Person("Anna", 18, Email("anna@nass.de"))
        assert persons[-1].name == "Fritz"

    def test_parse_empty(self):
        """Test empty roster."""
        assert roster.parse_roster([]) == ()

    def test_missing_field(self):
        """Test record missing fields names the record index."""
        records = [
            {'name': 'Anna', 'age': 18, 'email': 'anna@nass.de'},
            {'name': 'Bernd'},
        ]

        with pytest.raises(ValueError, match=r"record 1 missing field\(s\): age, email"):
            roster.parse_roster(records)

    def test_record_not_a_dict(self):
        """Test non-object records are rejected."""
        with pytest.raises(ValueError, match="record 0 must be an object"):
            roster.parse_roster(["anna@nass.de"])

    def test_invalid_email(self):
        """Test email without '@' fails."""
        with pytest.raises(InvalidEmail):
            roster.parse_roster([{'name': 'Anna', 'age': 18, 'email': 'anna'}])


class TestLoadRosterJson:
    """Test JSON roster decoding."""

    def test_top_level_list(self, party_records):
        """Test a plain JSON list."""
        persons = roster.load_roster_json(json.dumps(party_records).encode('utf-8'))
        assert len(persons) == 6

    def test_persons_object(self, party_records):
        """Test an object with a persons list."""
        raw = json.dumps({'persons': party_records}).encode('utf-8')
        assert roster.load_roster_json(raw) == roster.build_party_roster()

    def test_invalid_json(self):
        """Test malformed JSON."""
        with pytest.raises(ValueError, match="not valid JSON"):
            roster.load_roster_json(b"{not json")

    def test_invalid_utf8(self):
        """Test undecodable bytes."""
        with pytest.raises(ValueError, match="not valid JSON"):
            roster.load_roster_json(b"\xff\xfe\xfa")

    @pytest.mark.parametrize("document", [{'guests': []}, "Anna", 42, {'persons': 'Anna'}])
    def test_wrong_shape(self, document):
        """Test documents that are not rosters."""
        with pytest.raises(ValueError, match="must be a list"):
            roster.load_roster_json(json.dumps(document).encode('utf-8'))


class TestPartyRoster:
    """Test the built-in party roster."""

    def test_build_party_roster(self):
        """Test the six demo guests."""
        persons = roster.build_party_roster()

        assert [p.name for p in persons] == ["Anna", "Bernd", "Caro", "Dora", "Edgar", "Fritz"]
        assert [p.age for p in persons] == [18, 17, 25, 49, 20, 5]

    def test_each_call_builds_equal_roster(self):
        """Test building twice gives equal values."""
        assert roster.build_party_roster() == roster.build_party_roster()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
