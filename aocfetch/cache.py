import logging
from pathlib import Path

from .exceptions import CacheError
from .utils import atomic_write_file


log = logging.getLogger(__name__)


INPUT_DIR = "inputs"


def input_path(year, day, directory=None):
    """
    Where the input for (year, day) is cached, e.g. ``inputs/2017-5.txt``.
    Relative to the current working directory. Does not touch the filesystem.
    """
    if directory is None:
        directory = INPUT_DIR
    return Path(directory) / f"{year}-{day}.txt"


def save_input(year, day, body):
    """
    Write body to the cache file for (year, day), creating the inputs directory
    (but not any parents of it) if needed. An existing file is replaced.
    """
    path = input_path(year, day)
    log.info("saving input for day %s-%s to %s", day, year, path.parent)
    if not path.parent.exists():
        try:
            path.parent.mkdir()
        except OSError as err:
            raise CacheError("Unable to create input directory") from err
    try:
        atomic_write_file(path, body)
    except OSError as err:
        raise CacheError("Unable to write the file") from err
    return path


def load_input(year, day):
    """Contents of the cache file for (year, day), exactly as they were saved."""
    path = input_path(year, day)
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise CacheError("Unable to read the file") from err
