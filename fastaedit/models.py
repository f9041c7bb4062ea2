"""Data models for fastaedit using Pydantic."""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidOperationArgument
from .validate import validate_bases


class GenomeEnd(str, Enum):
    """The genome end a copyback starts from."""
    FIVE = "5"
    THREE = "3"

    @classmethod
    def parse(cls, token: Union[str, int, "GenomeEnd"]) -> "GenomeEnd":
        """Accepts 5/3 as ints, plain tokens, or primed tokens like 5'."""
        if isinstance(token, GenomeEnd):
            return token
        value = str(token).strip().rstrip("'")
        try:
            return cls(value)
        except ValueError:
            raise InvalidOperationArgument(
                f"gend must be either 5 or 3, got '{token}'", argument="gend"
            ) from None

    @property
    def label(self) -> str:
        return f"{self.value}'"


class EditKind(str, Enum):
    DELETE = "delete"
    INSERT = "insert"
    INVERT = "invert"
    DUPLICATE = "duplicate"
    COPYBACK = "copyback"


@dataclass(frozen=True)
class Region:
    """A 1-based, inclusive stretch of a sequence."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def to_slice(self) -> slice:
        """0-based, end-exclusive slice covering the region."""
        return slice(self.start - 1, self.end)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class SequenceRecord:
    """
    A single DNA sequence with its descriptive header.

    ``header`` is the FASTA description line without the leading '>'.
    Records are immutable; edits produce new records via ``with_edit``.
    """
    header: str
    bases: str

    def __post_init__(self):
        validate_bases(self.bases, "sequence")

    @classmethod
    def from_text(cls, header: str, raw: str) -> "SequenceRecord":
        """Builds a record from loosely formatted text, dropping whitespace and uppercasing."""
        bases = "".join(raw.split()).upper()
        return cls(header=header.lstrip(">").rstrip("\r\n"), bases=bases)

    def __len__(self) -> int:
        return len(self.bases)

    def with_edit(self, bases: str, clause: str) -> "SequenceRecord":
        """Returns a new record with the given bases and ``[clause]`` appended to the header."""
        return replace(self, header=f"{self.header} [{clause}]", bases=bases)


class _OperationBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class Delete(_OperationBase):
    """Remove the closed region [start, end]."""
    kind: Literal["delete"] = "delete"
    start: int
    end: int

    @property
    def region(self) -> Region:
        return Region(self.start, self.end)


class Insert(_OperationBase):
    """Splice ``bases`` in immediately before ``position``."""
    kind: Literal["insert"] = "insert"
    position: int
    bases: str = Field(..., description="Bases to insert (uppercased on construction)")

    @field_validator("bases", mode="before")
    @classmethod
    def uppercase_bases(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class Invert(_OperationBase):
    """Reverse (or reverse-complement) the closed region [start, end]."""
    kind: Literal["invert"] = "invert"
    start: int
    end: int
    complement: bool = False

    @property
    def region(self) -> Region:
        return Region(self.start, self.end)


class Duplicate(_OperationBase):
    """Copy [start, end] before ``position``; without a position the copy is tandem."""
    kind: Literal["duplicate"] = "duplicate"
    start: int
    end: int
    position: Optional[int] = None

    @property
    def region(self) -> Region:
        return Region(self.start, self.end)

    @property
    def tandem(self) -> bool:
        return self.position is None

    @property
    def target(self) -> int:
        """Insertion point of the copy; a tandem copy lands right after the source."""
        return self.end + 1 if self.tandem else self.position


class Copyback(_OperationBase):
    """
    Copyback replication artifact.

    Keeps positions 1..breakpoint of the working sequence and appends a
    reverse-complemented hairpin arm. For a 3' copyback, the working sequence
    is the reverse complement of the input and both positions count from its
    5' end. ``backstart == breakpoint`` denotes a snapback.
    """
    kind: Literal["copyback"] = "copyback"
    end: GenomeEnd
    breakpoint: int
    backstart: int

    @field_validator("end", mode="before")
    @classmethod
    def parse_end(cls, v):
        if isinstance(v, (str, int)) and not isinstance(v, GenomeEnd):
            return str(v).strip().rstrip("'")
        return v

    @classmethod
    def snapback(cls, end: Union[GenomeEnd, str, int], breakpoint: int) -> "Copyback":
        return cls(end=GenomeEnd.parse(end), breakpoint=breakpoint, backstart=breakpoint)

    @property
    def is_snapback(self) -> bool:
        return self.backstart == self.breakpoint


Operation = Annotated[
    Union[Delete, Insert, Invert, Duplicate, Copyback],
    Field(discriminator="kind"),
]


class EditDescription(BaseModel):
    """Structured account of an edit, rendered into a header clause by the annotator."""
    kind: EditKind = Field(..., description="Which operation was performed")
    length: int = Field(..., description="Number of bases deleted, inserted, inverted or duplicated")
    start: Optional[int] = Field(None, description="Region start (1-based)")
    end: Optional[int] = Field(None, description="Region end (1-based, inclusive)")
    position: Optional[int] = Field(None, description="Insertion or duplication target (1-based)")
    complement: bool = Field(False, description="Inversion was reverse-complemented")
    tandem: bool = Field(False, description="Duplication was tandem")
    genome_end: Optional[GenomeEnd] = Field(None, description="Copyback end")
    breakpoint: Optional[int] = Field(None, description="Copyback breakpoint")
    backstart: Optional[int] = Field(None, description="Copyback hairpin start")
    snapback: bool = Field(False, description="Copyback was a snapback")


@dataclass(frozen=True)
class EditResult:
    """Output of a single executor: the new record and what was done to produce it."""
    record: SequenceRecord
    edit: EditDescription
