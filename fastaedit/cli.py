import logging
from typing import Optional, TextIO

import click

from fastaedit.apply.single import apply_operation
from fastaedit.config import load_config
from fastaedit.exceptions import FastaEditError, InvalidOperationArgument
from fastaedit.io.fasta import read_fasta_path, write_fasta
from fastaedit.parse import parse_operation

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _configure_logging(config_level: str, verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = min(logging.INFO, logging.getLevelName(config_level))
    else:
        level = logging.getLevelName(config_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("fastaedit").setLevel(level)


def _set_output(ctx: click.Context, param: click.Parameter, value: Optional[TextIO]) -> None:
    if value is not None:
        ctx.obj["output"] = value


# Lets -o/--output also follow the operation arguments.
_output_option = click.option(
    "-o",
    "--output",
    type=click.File("w", lazy=True),
    expose_value=False,
    callback=_set_output,
    help="Write the resulting FASTA to this file instead of stdout.",
)


def _run(ctx: click.Context, request: dict) -> None:
    """Reads the input record, applies one operation and writes the result."""
    state = ctx.obj
    try:
        operation = parse_operation(request)
        record = read_fasta_path(state["input_file"])
        result = apply_operation(record, operation)
    except FastaEditError as e:
        logger.error(f"Error: {e}")
        raise click.Abort()
    except OSError as e:
        logger.error(f"Could not read {state['input_file']}: {e}")
        raise click.Abort()

    output: TextIO = state["output"]
    write_fasta(result.record, output, line_width=state["line_width"])
    logger.info(f"Wrote {len(result.record)}bp sequence to {output.name}")


@click.group(
    epilog=(
        "Positions are 1-based and inclusive. Without --output the result is "
        "written to stdout, so operations can be chained: "
        "fastaedit input.fa delete 5 10 | fastaedit - insert 20 GGGG"
    )
)
@click.option(
    "-o",
    "--output",
    type=click.File("w", lazy=True),
    default="-",
    help="Write the resulting FASTA to this file instead of stdout.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON editor configuration.",
)
@click.option(
    "--line-width",
    type=click.IntRange(min=1),
    help="Override the FASTA line width (default 70).",
)
@click.option("-v", "--verbose", count=True, help="Log progress to stderr (-vv for debug).")
@click.argument("input_file", type=click.Path(allow_dash=True))
@click.pass_context
def main(
    ctx: click.Context,
    output: TextIO,
    config_path: Optional[str],
    line_width: Optional[int],
    verbose: int,
    input_file: str,
):
    """
    Applies one structural edit to a single-sequence FASTA file.

    INPUT_FILE is a FASTA path, or '-' to read from stdin.
    """
    try:
        cfg = load_config(config_path)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config")

    _configure_logging(cfg.log_level, verbose)
    ctx.obj = {
        "input_file": input_file,
        "output": output,
        "line_width": line_width or cfg.line_width,
    }


@main.command()
@_output_option
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.pass_context
def delete(ctx: click.Context, start: int, end: int):
    """Delete bases START-END."""
    _run(ctx, {"kind": "delete", "start": start, "end": end})


@main.command()
@_output_option
@click.argument("position", type=int)
@click.argument("sequence")
@click.pass_context
def insert(ctx: click.Context, position: int, sequence: str):
    """Insert SEQUENCE before POSITION (length+1 appends)."""
    _run(ctx, {"kind": "insert", "position": position, "bases": sequence})


@main.command()
@_output_option
@click.option("--complement", is_flag=True, help="Reverse complement instead of plain reversal.")
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.pass_context
def invert(ctx: click.Context, complement: bool, start: int, end: int):
    """Invert bases START-END."""
    _run(ctx, {"kind": "invert", "start": start, "end": end, "complement": complement})


@main.command()
@_output_option
@click.option("-td", "--tandem", is_flag=True, help="Place the copy directly after the source.")
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.argument("position", type=int, required=False)
@click.pass_context
def duplicate(ctx: click.Context, tandem: bool, start: int, end: int, position: Optional[int]):
    """Duplicate bases START-END to POSITION, or in tandem with -td."""
    try:
        if tandem and position is not None:
            raise InvalidOperationArgument(
                "Tandem duplicate operation takes only start and end positions", argument="position"
            )
        if not tandem and position is None:
            raise InvalidOperationArgument(
                "Duplicate operation requires start, end, and insert positions", argument="position"
            )
    except InvalidOperationArgument as e:
        logger.error(f"Error: {e}")
        raise click.Abort()
    _run(ctx, {"kind": "duplicate", "start": start, "end": end, "position": position})


@main.command()
@_output_option
@click.option("-sb", "--snapback", is_flag=True, help="Hairpin arm spans the whole retained region.")
@click.argument("gend")
@click.argument("breakpoint", type=int)
@click.argument("backstart", type=int, required=False)
@click.pass_context
def copyback(ctx: click.Context, snapback: bool, gend: str, breakpoint: int, backstart: Optional[int]):
    """
    Copyback from genome end GEND (5 or 3).

    Keeps positions 1-BREAKPOINT and appends the reverse complement of
    BACKSTART-BREAKPOINT. For GEND 3 the sequence is reverse complemented
    first and positions refer to that orientation. With -sb, the arm is the
    reverse complement of the whole retained region.
    """
    try:
        if snapback and backstart is not None:
            raise InvalidOperationArgument(
                "Copyback with -sb flag takes only gend and breakpoint", argument="backstart"
            )
        if not snapback and backstart is None:
            raise InvalidOperationArgument(
                "Copyback operation requires gend, breakpoint, and backstart", argument="backstart"
            )
        if not snapback and backstart == breakpoint:
            raise InvalidOperationArgument(
                f"backstart ({backstart}) must be less than breakpoint ({breakpoint})",
                argument="backstart",
            )
    except InvalidOperationArgument as e:
        logger.error(f"Error: {e}")
        raise click.Abort()
    _run(ctx, {
        "kind": "copyback",
        "end": gend,
        "breakpoint": breakpoint,
        "backstart": backstart,
        "snapback": snapback,
    })


if __name__ == "__main__":
    main()
