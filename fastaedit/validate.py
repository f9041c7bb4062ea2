"""
Coordinate validation for sequence edits.

All positions are 1-based and inclusive. Each check either returns quietly or
raises a specific FastaEditError; nothing here touches the sequence itself.
"""
import logging

from .exceptions import (
    InvalidBaseAlphabet,
    InvalidOperationArgument,
    InvertedRange,
    MultiSequenceInput,
    OutOfBoundsPosition,
    OutOfBoundsRegion,
)

_logger = logging.getLogger(__name__)

VALID_BASES = frozenset("ATCGN")


def validate_bases(bases: str, argument: str = "sequence") -> None:
    """
    Checks that a base string is non-empty and drawn from {A, T, C, G, N}.

    Args:
        bases: The bases to check. Must already be uppercase.
        argument: Name used in error messages (e.g. 'sequence', 'insertion').

    Raises:
        MultiSequenceInput: If a FASTA header marker appears in a sequence (not a payload).
        InvalidBaseAlphabet: If the string is empty or holds any other character.
    """
    if not bases:
        raise InvalidBaseAlphabet(f"The {argument} must not be empty", argument=argument)
    if argument == "sequence" and ">" in bases:
        raise MultiSequenceInput(
            f"The {argument} contains a '>' record marker; only one contiguous sequence is supported"
        )
    invalid = sorted(set(bases) - VALID_BASES)
    if invalid:
        raise InvalidBaseAlphabet(
            f"The {argument} must contain only valid DNA bases (A, T, C, G, N); "
            f"found {', '.join(repr(c) for c in invalid)}",
            invalid="".join(invalid),
            argument=argument,
        )


def validate_region(start: int, end: int, length: int) -> None:
    """
    Checks that [start, end] is an ordered region inside a sequence of the given length.

    Ordering is checked first, so an inverted range is reported as such even
    when it is also out of bounds.
    """
    if start > end:
        raise InvertedRange(
            f"Start position {start} must be <= end position {end}", start=start, end=end
        )
    if start < 1:
        raise OutOfBoundsRegion(
            f"Region {start}-{end} starts before position 1 (positions are 1-based)",
            start=start, end=end, length=length,
        )
    if end > length:
        raise OutOfBoundsRegion(
            f"End position {end} is beyond sequence length {length}",
            start=start, end=end, length=length,
        )
    _logger.debug(f"Region {start}-{end} is valid for sequence of length {length}")


def validate_position(
    position: int,
    length: int,
    allow_append: bool = False,
    argument: str = "position",
) -> None:
    """
    Checks a single 1-based position.

    With ``allow_append`` the position may be ``length + 1``, which is how an
    insertion addresses the end of the sequence.
    """
    upper = length + 1 if allow_append else length
    if position < 1:
        raise OutOfBoundsPosition(
            f"{argument.capitalize()} {position} must be 1-based (starting from 1)",
            position=position, length=length, argument=argument,
        )
    if position > upper:
        raise OutOfBoundsPosition(
            f"{argument.capitalize()} {position} is beyond sequence length {length}",
            position=position, length=length, argument=argument,
        )


def validate_copyback(breakpoint: int, backstart: int, length: int) -> None:
    """
    Checks copyback coordinates against the working sequence.

    ``backstart`` must lie strictly before ``breakpoint``; equality is the
    snapback form and is accepted.
    """
    validate_position(breakpoint, length, argument="breakpoint")
    validate_position(backstart, length, argument="backstart")
    if backstart > breakpoint:
        raise InvalidOperationArgument(
            f"backstart ({backstart}) must be less than breakpoint ({breakpoint})",
            argument="backstart",
        )
