"""
Copyback and snapback executor.

A copyback keeps the genome up to a breakpoint and then continues by copying
the nascent strand back on itself, producing a reverse-complemented hairpin
arm. The 3' form is handled by first flipping the whole sequence into its
reverse complement, so every coordinate counts from the relevant 5' start.
"""
import logging
from typing import Tuple

from ..models import Copyback, EditDescription, EditKind, GenomeEnd, SequenceRecord
from ..validate import validate_copyback
from .primitives import reverse_complement

_logger = logging.getLogger(__name__)


def orient_for_copyback(bases: str, end: GenomeEnd) -> str:
    """
    Returns the working sequence whose coordinates a copyback refers to.

    For the 5' end this is the input unchanged; for the 3' end it is the
    reverse complement of the entire input.
    """
    if end == GenomeEnd.THREE:
        _logger.debug(f"Reverse complementing {len(bases)}bp reference for 3' copyback")
        return reverse_complement(bases)
    return bases


def build_hairpin(bases: str, breakpoint: int, backstart: int) -> str:
    """
    Joins the retained head [1, breakpoint] to its hairpin arm.

    The arm is the reverse complement of [backstart, breakpoint]. When
    ``backstart == breakpoint`` (snapback) the arm instead spans the whole
    retained head, so the result is a perfect palindrome of length 2 * breakpoint.
    Coordinates are 1-based and must already be validated.
    """
    head = bases[:breakpoint]
    if backstart == breakpoint:
        arm = reverse_complement(head)
    else:
        arm = reverse_complement(bases[backstart - 1:breakpoint])
    return head + arm


def execute_copyback(record: SequenceRecord, op: Copyback) -> Tuple[str, EditDescription]:
    """
    Applies a copyback or snapback to ``record``.

    Returns:
        The new bases and an EditDescription of the hairpin formed.

    Raises:
        OutOfBoundsPosition: If breakpoint or backstart fall outside the sequence.
        InvalidOperationArgument: If backstart lies after breakpoint.
    """
    # Reverse complementing preserves length, so validate against the input.
    validate_copyback(op.breakpoint, op.backstart, len(record))

    working = orient_for_copyback(record.bases, op.end)
    new_bases = build_hairpin(working, op.breakpoint, op.backstart)
    _logger.debug(
        f"{op.end.label} copyback: kept {op.breakpoint}bp, appended "
        f"{len(new_bases) - op.breakpoint}bp hairpin arm"
    )
    edit = EditDescription(
        kind=EditKind.COPYBACK,
        length=len(new_bases) - op.breakpoint,
        genome_end=op.end,
        breakpoint=op.breakpoint,
        backstart=op.backstart,
        snapback=op.is_snapback,
    )
    return new_bases, edit
