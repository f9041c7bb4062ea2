import pytest

from fastaedit.exceptions import InvalidOperationArgument
from fastaedit.models import Copyback, Delete, Duplicate, GenomeEnd, Insert, Invert
from fastaedit.parse import parse_operation


def test_parse_each_kind():
    assert parse_operation({"kind": "delete", "start": 3, "end": 5}) == Delete(start=3, end=5)
    assert parse_operation({"kind": "insert", "position": 2, "bases": "tt"}) == Insert(position=2, bases="TT")
    assert parse_operation({"kind": "invert", "start": 1, "end": 4, "complement": True}).complement
    assert parse_operation({"kind": "duplicate", "start": 1, "end": 4}).tandem
    assert isinstance(parse_operation({"kind": "duplicate", "start": 1, "end": 4, "position": 9}), Duplicate)
    assert isinstance(parse_operation({"kind": "invert", "start": 1, "end": 4}), Invert)


def test_parse_copyback():
    op = parse_operation({"kind": "copyback", "end": "3", "breakpoint": 50, "backstart": 20})
    assert isinstance(op, Copyback)
    assert op.end == GenomeEnd.THREE
    assert op.backstart == 20


def test_parse_snapback():
    op = parse_operation({"kind": "copyback", "end": "5", "breakpoint": 50, "snapback": True})
    assert op.is_snapback
    assert op.backstart == 50


def test_parse_bad_end():
    with pytest.raises(InvalidOperationArgument, match="gend"):
        parse_operation({"kind": "copyback", "end": "x", "breakpoint": 50, "backstart": 20})


def test_parse_unknown_kind():
    with pytest.raises(InvalidOperationArgument):
        parse_operation({"kind": "transpose", "start": 1, "end": 2})


def test_parse_missing_field():
    with pytest.raises(InvalidOperationArgument) as excinfo:
        parse_operation({"kind": "delete", "start": 1})
    assert excinfo.value.argument == "end"


def test_parse_non_numeric():
    with pytest.raises(InvalidOperationArgument):
        parse_operation({"kind": "delete", "start": "one", "end": 2})
