"""Pytest configuration and fixtures for tests."""
import pytest

from fastaedit.models import SequenceRecord

# 1-based: 1A 2C 3G 4T 5A 6C 7G 8T 9A 10C
SAMPLE_BASES = "ACGTACGTAC"


@pytest.fixture
def record():
    """A short record used across executor tests."""
    return SequenceRecord(header="test_seq", bases=SAMPLE_BASES)


@pytest.fixture
def make_record():
    """Create a record from arbitrary bases."""
    def _make_record(bases, header="test_seq"):
        return SequenceRecord(header=header, bases=bases)
    return _make_record
