"""
Applies a single structural edit to a sequence record.
This is the core engine for sequence manipulation.
"""
import logging
from typing import Callable, Dict, Optional, Tuple, Type, Union

from ..annotate import format_annotation
from ..exceptions import InvalidOperationArgument
from ..models import (
    Copyback,
    Delete,
    Duplicate,
    EditDescription,
    EditKind,
    EditResult,
    GenomeEnd,
    Insert,
    Invert,
    SequenceRecord,
)
from ..validate import validate_bases, validate_position, validate_region
from .copyback import execute_copyback
from .primitives import reverse, reverse_complement, transform_region

_logger = logging.getLogger(__name__)


def _splice(bases: str, position: int, payload: str) -> str:
    """Inserts ``payload`` immediately before 1-based ``position``."""
    idx = position - 1
    return bases[:idx] + payload + bases[idx:]


def execute_delete(record: SequenceRecord, op: Delete) -> Tuple[str, EditDescription]:
    validate_region(op.start, op.end, len(record))
    region = op.region
    if region.length == len(record):
        raise InvalidOperationArgument(
            f"Deleting positions {region} would remove the entire sequence", argument="end"
        )
    sl = region.to_slice()
    new_bases = record.bases[:sl.start] + record.bases[sl.stop:]
    edit = EditDescription(
        kind=EditKind.DELETE, length=region.length, start=op.start, end=op.end
    )
    return new_bases, edit


def execute_insert(record: SequenceRecord, op: Insert) -> Tuple[str, EditDescription]:
    validate_position(op.position, len(record), allow_append=True)
    validate_bases(op.bases, "insertion")
    new_bases = _splice(record.bases, op.position, op.bases)
    edit = EditDescription(kind=EditKind.INSERT, length=len(op.bases), position=op.position)
    return new_bases, edit


def execute_invert(record: SequenceRecord, op: Invert) -> Tuple[str, EditDescription]:
    validate_region(op.start, op.end, len(record))
    fn = reverse_complement if op.complement else reverse
    new_bases = transform_region(record.bases, op.start, op.end, fn)
    edit = EditDescription(
        kind=EditKind.INVERT,
        length=op.region.length,
        start=op.start,
        end=op.end,
        complement=op.complement,
    )
    return new_bases, edit


def execute_duplicate(record: SequenceRecord, op: Duplicate) -> Tuple[str, EditDescription]:
    validate_region(op.start, op.end, len(record))
    if not op.tandem:
        validate_position(op.position, len(record), allow_append=True)
    segment = record.bases[op.region.to_slice()]
    new_bases = _splice(record.bases, op.target, segment)
    edit = EditDescription(
        kind=EditKind.DUPLICATE,
        length=len(segment),
        start=op.start,
        end=op.end,
        position=op.target,
        tandem=op.tandem,
    )
    return new_bases, edit


_Executor = Callable[[SequenceRecord, object], Tuple[str, EditDescription]]

_EXECUTORS: Dict[Type, _Executor] = {
    Delete: execute_delete,
    Insert: execute_insert,
    Invert: execute_invert,
    Duplicate: execute_duplicate,
    Copyback: execute_copyback,
}


def apply_operation(
    record: SequenceRecord,
    operation: Union[Delete, Insert, Invert, Duplicate, Copyback],
) -> EditResult:
    """
    Applies one operation to a sequence record.

    Args:
        record: The input record. It is never modified.
        operation: One of Delete, Insert, Invert, Duplicate or Copyback.

    Returns:
        An EditResult holding the new record, whose header carries one more
        bracketed clause, and the structured description of the edit.

    Raises:
        FastaEditError: If any coordinate or argument is invalid. Validation
            happens before any bases are rewritten.
    """
    executor = _EXECUTORS.get(type(operation))
    if executor is None:
        raise InvalidOperationArgument(
            f"Unknown operation '{type(operation).__name__}'. "
            "Use 'delete', 'insert', 'invert', 'duplicate', or 'copyback'"
        )

    _logger.debug(f"Applying {operation!r} to sequence of length {len(record)}")
    new_bases, edit = executor(record, operation)
    clause = format_annotation(edit)
    _logger.info(f"{clause} (length {len(record)} -> {len(new_bases)})")
    return EditResult(record=record.with_edit(new_bases, clause), edit=edit)


def delete(record: SequenceRecord, start: int, end: int) -> SequenceRecord:
    return apply_operation(record, Delete(start=start, end=end)).record


def insert(record: SequenceRecord, position: int, bases: str) -> SequenceRecord:
    return apply_operation(record, Insert(position=position, bases=bases)).record


def invert(record: SequenceRecord, start: int, end: int, complement: bool = False) -> SequenceRecord:
    return apply_operation(record, Invert(start=start, end=end, complement=complement)).record


def duplicate(
    record: SequenceRecord, start: int, end: int, position: Optional[int] = None
) -> SequenceRecord:
    """Duplicates [start, end] before ``position``, or in tandem when no position is given."""
    return apply_operation(record, Duplicate(start=start, end=end, position=position)).record


def tandem_duplicate(record: SequenceRecord, start: int, end: int) -> SequenceRecord:
    return duplicate(record, start, end)


def copyback(
    record: SequenceRecord,
    end: Union[GenomeEnd, str, int],
    breakpoint: int,
    backstart: int,
) -> SequenceRecord:
    op = Copyback(end=GenomeEnd.parse(end), breakpoint=breakpoint, backstart=backstart)
    return apply_operation(record, op).record


def snapback(record: SequenceRecord, end: Union[GenomeEnd, str, int], breakpoint: int) -> SequenceRecord:
    return apply_operation(record, Copyback.snapback(end, breakpoint)).record
