__version__ = "0.1.0"

# Import key functions/classes to make them available at the package level
from .apply.single import (
    apply_operation,
    copyback,
    delete,
    duplicate,
    insert,
    invert,
    snapback,
    tandem_duplicate,
)
from .exceptions import (
    FastaEditError,
    FastaFormatError,
    InvalidBaseAlphabet,
    InvalidOperationArgument,
    InvertedRange,
    MultiSequenceInput,
    OutOfBoundsPosition,
    OutOfBoundsRegion,
)
from .models import (
    Copyback,
    Delete,
    Duplicate,
    EditDescription,
    EditResult,
    GenomeEnd,
    Insert,
    Invert,
    SequenceRecord,
)

__all__ = [
    'apply_operation',
    'copyback',
    'delete',
    'duplicate',
    'insert',
    'invert',
    'snapback',
    'tandem_duplicate',
    'FastaEditError',
    'FastaFormatError',
    'InvalidBaseAlphabet',
    'InvalidOperationArgument',
    'InvertedRange',
    'MultiSequenceInput',
    'OutOfBoundsPosition',
    'OutOfBoundsRegion',
    'Copyback',
    'Delete',
    'Duplicate',
    'EditDescription',
    'EditResult',
    'GenomeEnd',
    'Insert',
    'Invert',
    'SequenceRecord',
]
