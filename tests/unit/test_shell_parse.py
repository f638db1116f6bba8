import pytest
from memtree import MTResult, MTStatus
from memtree._shell import ParsedCommand, parse_command, render


def test_parse_single_argument():
    assert parse_command("create notes.txt") == ParsedCommand("create", ["notes.txt"])


def test_parse_no_arguments():
    assert parse_command("parent") == ParsedCommand("parent", [])


def test_parse_empty_line():
    assert parse_command("   ") == ParsedCommand("")


def test_parse_collapses_surrounding_whitespace():
    assert parse_command("  cd   docs  ") == ParsedCommand("cd", ["docs"])


def test_parse_write_keeps_rest_of_line():
    assert parse_command("write f hello  big world") == ParsedCommand("write", ["f", "hello  big world"])


def test_parse_write_without_content():
    assert parse_command("write f") == ParsedCommand("write", ["f", ""])


def test_parse_write_without_name():
    assert parse_command("write") == ParsedCommand("write", [])


def test_parse_write_preserves_leading_content_spaces():
    assert parse_command("write f   indented") == ParsedCommand("write", ["f", "  indented"])


def test_parse_keyword_is_case_sensitive():
    assert parse_command("createDir d").keyword == "createDir"
    assert parse_command("CREATEDIR d").keyword == "CREATEDIR"


def test_render_read_includes_content():
    text = render("read", MTResult.success("f", "body"))
    assert text == "Reading from in-memory file 'f':\nbody"


def test_render_dangling_parent():
    assert render("parent", MTResult(MTStatus.DANGLING_PARENT, "x")) == "Error: Parent directory no longer exists."


def test_render_unknown_combination_raises():
    with pytest.raises(ValueError, match="No message"):
        render("root", MTResult(MTStatus.NOT_FOUND))
