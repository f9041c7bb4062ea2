"""
Renders edit descriptions into the bracketed provenance clauses appended to
FASTA headers. The wording is consumed by downstream tooling and must not change.
"""
from .models import EditDescription, EditKind, GenomeEnd


def _copyback_clause(edit: EditDescription) -> str:
    end_label = edit.genome_end.label
    frame = " of reference revcomp" if edit.genome_end == GenomeEnd.THREE else ""
    if edit.snapback:
        return f"{end_label} copyback (snapback) at position {edit.breakpoint}{frame}"
    return (
        f"{end_label} copyback up to position {edit.breakpoint}{frame} "
        f"then reverse complement of position {edit.backstart} on"
    )


def format_annotation(edit: EditDescription) -> str:
    """
    Returns the header clause (without brackets) describing an edit.

    Args:
        edit: The EditDescription produced by an executor.

    Returns:
        The clause text, e.g. ``deleted 3bp at positions 3-5``.
    """
    if edit.kind == EditKind.DELETE:
        return f"deleted {edit.length}bp at positions {edit.start}-{edit.end}"
    if edit.kind == EditKind.INSERT:
        return f"inserted {edit.length}bp at position {edit.position}"
    if edit.kind == EditKind.INVERT:
        verb = "reverse complemented" if edit.complement else "inverted"
        return f"{verb} {edit.length}bp at positions {edit.start}-{edit.end}"
    if edit.kind == EditKind.DUPLICATE:
        if edit.tandem:
            return f"tandem duplicated {edit.length}bp at positions {edit.start}-{edit.end}"
        return (
            f"duplicated {edit.length}bp from positions {edit.start}-{edit.end} "
            f"to position {edit.position}"
        )
    if edit.kind == EditKind.COPYBACK:
        return _copyback_clause(edit)
    raise ValueError(f"Cannot annotate edit of kind '{edit.kind}'")
