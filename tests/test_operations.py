import pytest

from ferry.config import FerryError, Output
from ferry.operations import copy_selection, list_selection, move_selection
from ferry.store import SelectionStore


@pytest.fixture
def store(tmp_path):
    return SelectionStore(tmp_path / "cache")


@pytest.fixture
def src(tmp_path):
    directory = tmp_path / "src"
    directory.mkdir()
    return directory


@pytest.fixture
def dest(tmp_path):
    directory = tmp_path / "dest"
    directory.mkdir()
    return directory


def test_copy_empty_selection(store, dest, capsys):
    copy_selection(store, False, Output(), dest)
    assert capsys.readouterr().out == "No items selected. Run 'ferry select' first.\n"
    assert list(dest.iterdir()) == []


def test_copy_files_and_clear_selection(store, src, dest):
    a = src / "a.txt"
    b = src / "b.txt"
    a.write_text("alpha")
    b.write_text("beta")
    store.add([a, b])
    copy_selection(store, False, Output(silent=True), dest)
    assert (dest / "a.txt").read_text() == "alpha"
    assert (dest / "b.txt").read_text() == "beta"
    assert a.exists() and b.exists()
    assert store.read() == []


def test_copy_reports_progress(store, src, dest, capsys):
    a = src / "a.txt"
    a.write_text("alpha")
    store.add([a])
    copy_selection(store, False, Output(), dest)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Copying 1 selected items"
    assert lines[1] == f"Copied '{a}' to '{dest / 'a.txt'}'"
    assert lines[-1] == "Copy complete. Selection cleared."


def test_copy_existing_without_force_raises(store, src, dest):
    a = src / "a.txt"
    a.write_text("new")
    (dest / "a.txt").write_text("old")
    store.add([a])
    with pytest.raises(FerryError, match="already exists. Use --force to overwrite."):
        copy_selection(store, False, Output(silent=True), dest)
    assert (dest / "a.txt").read_text() == "old"
    assert store.read() == [a]


def test_copy_existing_with_force_overwrites(store, src, dest, capsys):
    a = src / "a.txt"
    a.write_text("new")
    (dest / "a.txt").write_text("old")
    store.add([a])
    copy_selection(store, True, Output(), dest)
    assert (dest / "a.txt").read_text() == "new"
    assert f"Overwriting existing file: {dest / 'a.txt'}" in capsys.readouterr().out


def test_copy_missing_source_raises(store, src, dest):
    store.add([src / "gone.txt"])
    with pytest.raises(FerryError, match="Failed to copy"):
        copy_selection(store, False, Output(silent=True), dest)
    assert store.read() == [src / "gone.txt"]


def test_copy_defaults_to_cwd(store, src, dest, monkeypatch, capsys):
    a = src / "a.txt"
    a.write_text("alpha")
    store.add([a])
    monkeypatch.chdir(dest)
    copy_selection(store, False, Output())
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == f"Copied '{a}' to '{dest / 'a.txt'}'"
    assert (dest / "a.txt").read_text() == "alpha"
    assert store.read() == []


def test_move_files(store, src, dest, capsys):
    a = src / "a.txt"
    a.write_text("alpha")
    store.add([a])
    move_selection(store, False, Output(), dest)
    assert not a.exists()
    assert (dest / "a.txt").read_text() == "alpha"
    assert store.read() == []
    assert capsys.readouterr().out.splitlines()[-1] == "Move complete. Selection cleared."


def test_move_directory(store, src, dest):
    folder = src / "folder"
    folder.mkdir()
    (folder / "inner.txt").write_text("inside")
    store.add([folder])
    move_selection(store, False, Output(silent=True), dest)
    assert not folder.exists()
    assert (dest / "folder" / "inner.txt").read_text() == "inside"


def test_move_existing_without_force_raises(store, src, dest):
    a = src / "a.txt"
    a.write_text("new")
    (dest / "a.txt").write_text("old")
    store.add([a])
    with pytest.raises(FerryError, match="already exists"):
        move_selection(store, False, Output(silent=True), dest)
    assert a.exists()
    assert (dest / "a.txt").read_text() == "old"


def test_move_force_replaces_directory(store, src, dest):
    a = src / "item"
    a.write_text("file content")
    existing = dest / "item"
    existing.mkdir()
    (existing / "stale.txt").write_text("stale")
    store.add([a])
    move_selection(store, True, Output(silent=True), dest)
    assert (dest / "item").is_file()
    assert (dest / "item").read_text() == "file content"


def test_list_empty(store, capsys):
    list_selection(store, False, Output())
    assert capsys.readouterr().out == "No files currently selected.\n"


def test_list_absolute(store, src, capsys):
    a = src / "a.txt"
    store.add([a])
    list_selection(store, False, Output(), cwd=src)
    assert capsys.readouterr().out.splitlines() == ["Currently selected files:", f"  {a}"]


def test_list_relative(store, tmp_path, src, dest, capsys):
    inside = src / "a.txt"
    outside = dest / "b.txt"
    store.add([inside, outside])
    list_selection(store, True, Output(), cwd=src)
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "  a.txt"
    assert lines[2] == f"  {outside}"


def test_list_silent_prints_nothing(store, src, capsys):
    store.add([src / "a.txt"])
    list_selection(store, False, Output(silent=True), cwd=src)
    assert capsys.readouterr().out == ""