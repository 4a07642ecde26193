import signal
import stat
import subprocess
import sys

import pytest

from oslab.syscalls import (
    cat,
    copy_with_markers,
    directory_exists,
    file_mode,
    kill_process,
    list_directories,
    list_regular_files,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "beta").mkdir()
    (tmp_path / "alpha").mkdir()
    (tmp_path / "notes.txt").write_text("notes")
    (tmp_path / "data.bin").write_bytes(b"\x00\x01")
    return tmp_path


def test_list_directories(tree):
    assert list_directories(tree) == ["alpha", "beta"]


def test_list_regular_files(tree):
    assert list_regular_files(tree) == ["data.bin", "notes.txt"]


def test_listings_do_not_overlap(tree):
    directories = list_directories(tree)
    files = list_regular_files(tree)
    assert sorted(directories + files) == ["alpha", "beta", "data.bin", "notes.txt"]
    assert len(set(directories) | set(files)) == 4


def test_file_mode_kinds(tree):
    assert stat.S_IFMT(file_mode(tree / "alpha")) == stat.S_IFDIR
    assert stat.S_IFMT(file_mode(tree / "notes.txt")) == stat.S_IFREG


def test_file_mode_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_mode(tmp_path / "missing")


def test_directory_exists(tree):
    assert directory_exists(tree / "alpha")
    assert not directory_exists(tree / "missing")
    assert not directory_exists(tree / "notes.txt")


def test_copy_with_markers(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"hello\n")
    target = tmp_path / "out.txt"
    written = copy_with_markers(source, target)
    assert written == b"START\nhello\nSTOP"
    assert target.read_bytes() == written


def test_copy_reads_at_most_one_hundred_bytes(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"x" * 150)
    target = tmp_path / "out.txt"
    copy_with_markers(source, target)
    assert target.read_bytes() == b"START\n" + b"x" * 100 + b"STOP"


def test_copy_stops_at_nul(tmp_path):
    source = tmp_path / "in.bin"
    source.write_bytes(b"ab\x00cd")
    assert copy_with_markers(source, tmp_path / "out") == b"START\nabSTOP"


def test_copy_missing_source_creates_nothing(tmp_path):
    target = tmp_path / "out"
    with pytest.raises(FileNotFoundError):
        copy_with_markers(tmp_path / "missing", target)
    assert not target.exists()


def test_cat_prints_file(tmp_path, capfd):
    path = tmp_path / "show.txt"
    path.write_text("line one\nline two\n")
    assert cat(path) == 0
    assert capfd.readouterr().out == "line one\nline two\n"


def test_cat_missing_file_fails(tmp_path, capfd):
    assert cat(tmp_path / "missing") > 0
    capfd.readouterr()


def test_kill_process_terminates_child():
    child = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    kill_process(child.pid)
    assert child.wait(timeout=10) == -signal.SIGKILL


def test_kill_reaped_process_raises():
    child = subprocess.Popen([sys.executable, "-c", "pass"])
    child.wait(timeout=10)
    with pytest.raises(ProcessLookupError):
        kill_process(child.pid)