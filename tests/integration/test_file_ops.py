import pytest
from memtree import MTStatus
from tests.helpers.asserts import assert_tree_well_formed


def test_create_file_basic(mtree):
    result = mtree.create_file("a.txt")
    assert result.ok
    assert result.name == "a.txt"
    assert mtree.list_files() == ["a.txt"]


def test_create_file_twice_reports_already_exists(mtree):
    mtree.create_file("a.txt")
    result = mtree.create_file("a.txt")
    assert result.status is MTStatus.ALREADY_EXISTS
    assert result.name == "a.txt"
    assert mtree.stats()["file_count"] == 1


def test_new_file_reads_empty(mtree):
    mtree.create_file("a.txt")
    result = mtree.read_file("a.txt")
    assert result.ok
    assert result.content == ""


@pytest.mark.parametrize(
    "content",
    ["", "hello", "hello world", "  leading and trailing  ", "line1\nline2\n", "tab\tsep", "日本語"],
)
def test_write_then_read_returns_exact_content(mtree, content):
    mtree.create_file("f")
    assert mtree.write_file("f", content).ok
    assert mtree.read_file("f").content == content


def test_write_overwrites_not_appends(mtree):
    mtree.create_file("f")
    mtree.write_file("f", "first version")
    mtree.write_file("f", "second")
    assert mtree.read_file("f").content == "second"


def test_write_result_carries_no_content(mtree):
    mtree.create_file("f")
    mtree.write_file("f", "old")
    result = mtree.write_file("f", "new")
    assert result.content is None


def test_write_missing_file_does_not_create(mtree):
    result = mtree.write_file("ghost", "data")
    assert result.status is MTStatus.NOT_FOUND
    assert mtree.list_files() == []


def test_read_missing_file(mtree):
    result = mtree.read_file("ghost")
    assert result.status is MTStatus.NOT_FOUND
    assert result.content is None


def test_delete_then_read_not_found(mtree):
    mtree.create_file("f")
    assert mtree.delete_file("f").ok
    assert mtree.read_file("f").status is MTStatus.NOT_FOUND


def test_delete_missing_file(mtree):
    assert mtree.delete_file("ghost").status is MTStatus.NOT_FOUND


def test_delete_then_recreate_starts_empty(mtree):
    mtree.create_file("f")
    mtree.write_file("f", "data")
    mtree.delete_file("f")
    assert mtree.create_file("f").ok
    assert mtree.read_file("f").content == ""


def test_file_and_directory_names_are_independent(mtree):
    assert mtree.create_file("a").ok
    assert mtree.create_directory("a").ok
    mtree.write_file("a", "file body")
    assert mtree.read_file("a").content == "file body"
    assert mtree.list_files() == ["a"]
    assert mtree.list_directories() == ["a"]
    assert_tree_well_formed(mtree)


def test_directory_then_file_with_same_name(mtree):
    assert mtree.create_directory("a").ok
    assert mtree.create_file("a").ok
    assert mtree.change_directory("a").ok
    assert mtree.list_files() == []


def test_create_directory_twice(mtree):
    mtree.create_directory("d")
    result = mtree.create_directory("d")
    assert result.status is MTStatus.ALREADY_EXISTS
    assert mtree.stats()["dir_count"] == 2


def test_files_are_scoped_to_their_directory(mtree):
    mtree.create_file("f")
    mtree.write_file("f", "root copy")
    mtree.create_directory("d")
    mtree.change_directory("d")
    assert mtree.read_file("f").status is MTStatus.NOT_FOUND
    assert mtree.create_file("f").ok
    mtree.write_file("f", "nested copy")
    mtree.go_to_root()
    assert mtree.read_file("f").content == "root copy"
