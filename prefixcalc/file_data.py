"""Reading text files and splitting them into lines."""

from .errors import TreeError, TreeErrorCode


def read_text(path):
    """Return the whole contents of the text file at ``path``."""
    try:
        with open(path, encoding="utf-8") as stream:
            return stream.read()
    except OSError as exc:
        raise TreeError(TreeErrorCode.FILE_OPEN_ERR, str(path)) from exc


def count_lines(text):
    """Count the newline characters in ``text``."""
    return text.count("\n")


def split_lines(text):
    """Split ``text`` at each newline; yields ``count_lines(text) + 1`` parts."""
    return text.split("\n")