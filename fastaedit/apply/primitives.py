"""
Base-level transforms shared by the edit executors.
"""
from typing import Callable

_COMPLEMENT = str.maketrans("ATCGN", "TAGCN")


def complement(seq: str) -> str:
    """Watson-Crick complement (A<->T, C<->G, N unchanged), order preserved."""
    return seq.translate(_COMPLEMENT)


def reverse(seq: str) -> str:
    return seq[::-1]


def reverse_complement(seq: str) -> str:
    """Computes the reverse complement of a DNA sequence."""
    return seq.translate(_COMPLEMENT)[::-1]


def transform_region(seq: str, start: int, end: int, fn: Callable[[str], str]) -> str:
    """
    Rewrites the 1-based inclusive region [start, end] of ``seq`` with ``fn``.

    Bases outside the region are untouched. Bounds must already have been
    validated by the caller.
    """
    start_idx = start - 1
    return seq[:start_idx] + fn(seq[start_idx:end]) + seq[end:]
