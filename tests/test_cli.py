import logging
import os

import pytest
from click.testing import CliRunner

from fastaedit.cli import main

# Define the paths to the test fixtures
FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")
SINGLE_PATH = os.path.join(FIXTURES, "single.fa")
MULTI_PATH = os.path.join(FIXTURES, "multi.fa")
CONFIG_PATH = os.path.join(FIXTURES, "editor_config.json")

HEADER = ">test_seq sample sequence"


@pytest.fixture
def runner():
    return CliRunner()


def test_delete(runner):
    result = runner.invoke(main, [SINGLE_PATH, "delete", "3", "5"])
    assert result.exit_code == 0
    assert result.output == f"{HEADER} [deleted 3bp at positions 3-5]\nACCGTAC\n"


def test_insert_from_stdin(runner):
    result = runner.invoke(main, ["-", "insert", "5", "tt"], input=">s\nAAAA\n")
    assert result.exit_code == 0
    assert result.output == ">s [inserted 2bp at position 5]\nAAAATT\n"


def test_invert_complement(runner):
    result = runner.invoke(main, [SINGLE_PATH, "invert", "--complement", "2", "4"])
    assert result.exit_code == 0
    assert result.output == f"{HEADER} [reverse complemented 3bp at positions 2-4]\nAACGACGTAC\n"


def test_duplicate_tandem(runner):
    result = runner.invoke(main, [SINGLE_PATH, "duplicate", "-td", "7", "9"])
    assert result.exit_code == 0
    assert result.output == f"{HEADER} [tandem duplicated 3bp at positions 7-9]\nACGTACGTAGTAC\n"


def test_duplicate_to_position(runner):
    result = runner.invoke(main, [SINGLE_PATH, "duplicate", "1", "3", "9"])
    assert result.exit_code == 0
    assert "[duplicated 3bp from positions 1-3 to position 9]" in result.output
    assert result.output.endswith("\nACGTACGTACGAC\n")


def test_duplicate_requires_position(runner, caplog):
    with caplog.at_level(logging.ERROR):
        result = runner.invoke(main, [SINGLE_PATH, "duplicate", "1", "3"])
    assert result.exit_code != 0
    assert "requires start, end, and insert positions" in caplog.text


def test_snapback(runner):
    result = runner.invoke(main, [SINGLE_PATH, "copyback", "-sb", "5", "4"])
    assert result.exit_code == 0
    assert result.output == f"{HEADER} [5' copyback (snapback) at position 4]\nACGTACGT\n"


def test_three_prime_copyback(runner):
    result = runner.invoke(main, [SINGLE_PATH, "copyback", "3", "5", "3"])
    assert result.exit_code == 0
    assert result.output == (
        f"{HEADER} [3' copyback up to position 5 of reference revcomp "
        "then reverse complement of position 3 on]\nGTACGCGT\n"
    )


def test_copyback_equal_positions_need_snapback_flag(runner, caplog):
    with caplog.at_level(logging.ERROR):
        result = runner.invoke(main, [SINGLE_PATH, "copyback", "5", "4", "4"])
    assert result.exit_code != 0
    assert "must be less than breakpoint" in caplog.text


def test_copyback_bad_gend(runner, caplog):
    with caplog.at_level(logging.ERROR):
        result = runner.invoke(main, [SINGLE_PATH, "copyback", "7", "4", "2"])
    assert result.exit_code != 0
    assert "gend must be either 5 or 3" in caplog.text


def test_inverted_range(runner, caplog):
    with caplog.at_level(logging.ERROR):
        result = runner.invoke(main, [SINGLE_PATH, "delete", "8", "5"])
    assert result.exit_code != 0
    assert "must be <= end position" in caplog.text
    assert ">" not in result.output


def test_multi_sequence_input(runner):
    result = runner.invoke(main, [MULTI_PATH, "delete", "1", "2"])
    assert result.exit_code != 0


def test_missing_input_file(runner):
    result = runner.invoke(main, ["does_not_exist.fa", "delete", "1", "2"])
    assert result.exit_code != 0


def test_output_file(runner, tmp_path):
    out_path = tmp_path / "out.fa"
    result = runner.invoke(main, ["-o", str(out_path), SINGLE_PATH, "delete", "1", "2"])
    assert result.exit_code == 0
    assert result.output == ""
    assert out_path.read_text() == f"{HEADER} [deleted 2bp at positions 1-2]\nGTACGTAC\n"


def test_output_file_not_written_on_error(runner, tmp_path):
    out_path = tmp_path / "out.fa"
    result = runner.invoke(main, ["-o", str(out_path), SINGLE_PATH, "delete", "1", "20"])
    assert result.exit_code != 0
    assert not out_path.exists()


def test_line_width(runner):
    result = runner.invoke(main, ["--line-width", "4", SINGLE_PATH, "invert", "1", "10"])
    assert result.exit_code == 0
    assert result.output == f"{HEADER} [inverted 10bp at positions 1-10]\nCATG\nCATG\nCA\n"


def test_config_line_width(runner):
    result = runner.invoke(main, ["--config", CONFIG_PATH, SINGLE_PATH, "delete", "1", "1"])
    assert result.exit_code == 0
    assert result.output.splitlines()[1] == "CGTACGTAC"


def test_chained_operations(runner):
    first = runner.invoke(main, [SINGLE_PATH, "delete", "3", "5"])
    assert first.exit_code == 0
    second = runner.invoke(main, ["-", "insert", "1", "GG"], input=first.output)
    assert second.exit_code == 0
    assert second.output == (
        f"{HEADER} [deleted 3bp at positions 3-5] [inserted 2bp at position 1]\nGGACCGTAC\n"
    )


def test_undecodable_input(runner, tmp_path, caplog):
    path = tmp_path / "bad.fa"
    path.write_bytes(b">s\nAC\xff\xfeGT\n")
    with caplog.at_level(logging.ERROR):
        result = runner.invoke(main, [str(path), "delete", "1", "1"])
    assert result.exit_code != 0
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "not valid text" in caplog.text


def test_non_object_config(runner, tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1]")
    result = runner.invoke(main, ["--config", str(path), SINGLE_PATH, "delete", "1", "1"])
    assert result.exit_code != 0
    assert not isinstance(result.exception, TypeError)


def test_output_option_after_arguments(runner, tmp_path):
    out_path = tmp_path / "out.fa"
    result = runner.invoke(main, [SINGLE_PATH, "delete", "3", "5", "-o", str(out_path)])
    assert result.exit_code == 0
    assert result.output == ""
    assert out_path.read_text() == f"{HEADER} [deleted 3bp at positions 3-5]\nACCGTAC\n"
