"""
Exceptions raised by fastaedit.

Every check runs before any bases are rewritten, so catching FastaEditError
guarantees that no partial result was produced.
"""
from typing import Optional


class FastaEditError(ValueError):
    """Base exception for all fastaedit errors."""
    pass


class OutOfBoundsPosition(FastaEditError):
    """A single position lies outside the range allowed for the operation."""

    def __init__(self, message: str, position: int, length: int, argument: str = "position"):
        super().__init__(message)
        self.position = position
        self.length = length
        self.argument = argument


class OutOfBoundsRegion(FastaEditError):
    """A region extends before position 1 or past the end of the sequence."""

    def __init__(self, message: str, start: int, end: int, length: int):
        super().__init__(message)
        self.start = start
        self.end = end
        self.length = length


class InvertedRange(FastaEditError):
    """A region whose start lies after its end."""

    def __init__(self, message: str, start: int, end: int):
        super().__init__(message)
        self.start = start
        self.end = end


class InvalidBaseAlphabet(FastaEditError):
    """Sequence or insertion payload contains characters outside A/T/C/G/N."""

    def __init__(self, message: str, invalid: str = "", argument: str = "sequence"):
        super().__init__(message)
        self.invalid = invalid
        self.argument = argument


class InvalidOperationArgument(FastaEditError):
    """An operation argument is malformed or violates an operation-specific constraint."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument

    def __str__(self):
        if self.argument:
            return f"Invalid argument '{self.argument}': {super().__str__()}"
        return super().__str__()


class MultiSequenceInput(FastaEditError):
    """Input holds more than one sequence record."""
    pass


class FastaFormatError(FastaEditError):
    """Input is not a well-formed single-record FASTA."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source

    def __str__(self):
        if self.source:
            return f"FASTA error in {self.source}: {super().__str__()}"
        return super().__str__()
