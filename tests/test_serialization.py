import os

import pytest

from gridslam import serialization


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "test_outputs").mkdir()
    serialization._random_directory.cache_clear()
    yield tmp_path
    serialization._random_directory.cache_clear()


@pytest.fixture
def bare_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    serialization._random_directory.cache_clear()
    yield tmp_path
    serialization._random_directory.cache_clear()


def test_random_string_length_and_charset():
    allowed = set(
        "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    )
    value = serialization.random_string(50)
    assert len(value) == 50
    assert set(value) <= allowed
    assert serialization.random_string(0) == ""


def test_random_string_rejects_negative():
    with pytest.raises(ValueError):
        serialization.random_string(-1)


def test_prepare_directory_creates_directory(workspace):
    path = serialization.prepare_directory(8)
    assert path.startswith("test_outputs/dir")
    assert path.endswith("/")
    assert len(path[len("test_outputs/dir"):-1]) == 8
    assert (workspace / path).is_dir()


def test_folder_name_is_stable(workspace):
    first = serialization.get_folder_name()
    assert serialization.get_folder_name() == first
    assert (workspace / first).is_dir()


def test_full_folder_path(workspace):
    folder = serialization.get_folder_name()
    full = serialization.get_full_folder_path()
    assert full == os.getcwd() + "/" + folder
    assert os.path.isdir(full)


def test_write_then_read_round_trip(workspace):
    with serialization.create_or_erase_file_for_write("data.bin") as handle:
        handle.write(b"first contents")
    with serialization.create_or_erase_file_for_write("data.bin") as handle:
        handle.write(b"xy")
    with serialization.open_file_for_read("data.bin") as handle:
        assert handle.read() == b"xy"


def test_general_read_of_missing_file(workspace):
    with pytest.raises(FileNotFoundError):
        serialization.open_general_file_for_read(str(workspace / "missing.bin"))


def test_write_without_output_root_fails(bare_dir):
    with pytest.raises(FileNotFoundError):
        serialization.create_or_erase_file_for_write("data.bin")