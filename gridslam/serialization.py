"""Scratch output directories with random names, and files inside them."""

from __future__ import annotations

import functools
import os
import random
import string

NUM_RANDOM_CHARS = 20
OUTPUT_ROOT = "test_outputs"

_CHARSET = string.digits + string.ascii_uppercase + string.ascii_lowercase
_DIR_MODE = 0o775
_FILE_MODE = 0o644
_MKDIR_ATTEMPTS = 10


def random_string(length):
    """A string of ``length`` random letters and digits."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return "".join(random.choices(_CHARSET, k=length))


def prepare_directory(random_string_length=NUM_RANDOM_CHARS):
    """Create a randomly named directory below ``test_outputs`` and return its path.

    The returned path ends with a separator. Creation is attempted a few
    times; failures are not reported here but surface when files are opened.
    """
    path = f"{OUTPUT_ROOT}/dir{random_string(random_string_length)}/"
    for _ in range(_MKDIR_ATTEMPTS):
        try:
            os.mkdir(path, _DIR_MODE)
        except OSError:
            continue
        break
    return path


@functools.lru_cache(maxsize=None)
def _random_directory():
    return prepare_directory(NUM_RANDOM_CHARS)


def create_or_erase_file_for_write(file_name):
    """Open ``file_name`` in the scratch directory for binary writing, truncating it."""
    path = _random_directory() + file_name
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, _FILE_MODE)
    return os.fdopen(fd, "wb")


def open_file_for_read(file_name):
    """Open ``file_name`` in the scratch directory for binary reading."""
    return open_general_file_for_read(_random_directory() + file_name)


def open_general_file_for_read(file_name):
    """Open any file for binary reading."""
    fd = os.open(file_name, os.O_RDONLY)
    return os.fdopen(fd, "rb")


def get_folder_name():
    """Relative path of the scratch directory, created on first use."""
    return _random_directory()


def get_full_folder_path():
    """Absolute path of the scratch directory."""
    folder = _random_directory()
    return os.getcwd() + "/" + folder