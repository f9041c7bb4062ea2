"""
Reads and writes single-record FASTA.
"""
import logging
import sys
from textwrap import wrap
from typing import Iterable, TextIO

from ..exceptions import FastaFormatError, MultiSequenceInput
from ..models import SequenceRecord

_logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH = 70


def read_fasta(lines: Iterable[str], source: str = "") -> SequenceRecord:
    """
    Parses exactly one FASTA record.

    Args:
        lines: Any iterable of text lines, such as an open file.
        source: Name used in error messages.

    Returns:
        The SequenceRecord, with bases stripped of whitespace and uppercased.

    Raises:
        FastaFormatError: If the input cannot be decoded, the header is missing,
            or no sequence follows it.
        MultiSequenceInput: If a second record starts.
        InvalidBaseAlphabet: If the sequence contains non-DNA characters.
    """
    try:
        return _parse_fasta(lines, source)
    except UnicodeDecodeError as e:
        raise FastaFormatError(f"Input is not valid text: {e}", source=source) from e


def _parse_fasta(lines: Iterable[str], source: str) -> SequenceRecord:
    iterator = iter(lines)
    header = next(iterator, None)
    if header is None or not header.strip():
        raise FastaFormatError("Input is empty", source=source)
    if not header.startswith(">"):
        raise FastaFormatError(
            "Input does not appear to be a valid FASTA file (no header starting with '>')",
            source=source,
        )

    chunks = []
    for line in iterator:
        if line.startswith(">"):
            raise MultiSequenceInput(
                "FASTA input contains multiple sequences. Only single-sequence files are supported."
            )
        chunks.append(line.strip())

    raw = "".join(chunks)
    if not raw:
        raise FastaFormatError("No sequence found in FASTA input", source=source)

    record = SequenceRecord.from_text(header[1:], raw)
    _logger.info(f"Read {len(record)}bp sequence from {source or 'input'}")
    return record


def read_fasta_path(path: str) -> SequenceRecord:
    """Reads a single-record FASTA from ``path``; ``-`` reads stdin."""
    if path == "-":
        return read_fasta(sys.stdin, source="stdin")
    with open(path, 'r', encoding='utf-8') as f:
        return read_fasta(f, source=path)


def format_fasta(record: SequenceRecord, line_width: int = DEFAULT_LINE_WIDTH) -> str:
    """Formats a record as FASTA text with the body wrapped at ``line_width``."""
    wrapped_sequence = "\n".join(wrap(record.bases, line_width))
    return f">{record.header}\n{wrapped_sequence}\n"


def write_fasta(record: SequenceRecord, handle: TextIO, line_width: int = DEFAULT_LINE_WIDTH) -> None:
    handle.write(format_fasta(record, line_width))
