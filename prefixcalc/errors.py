"""Error codes, their messages and the exception that carries them."""

from enum import IntEnum

from .colour import Colour, paint


class TreeErrorCode(IntEnum):
    """Failure kinds reported by the calculator."""

    SUCCESS = 0
    MEMORY_ALLOC_ERR = 1
    FILE_OPEN_ERR = 2
    FILE_CLOSE_ERR = 3
    FREAD_ERR = 4
    NULLPTR_ERR = 5
    SNPRINTF_ERR = 6
    NOT_ENOUGH_ARGC = 7
    FGETS_ERR = 8


_MESSAGES = {
    TreeErrorCode.SUCCESS: "SUCCESS",
    TreeErrorCode.FILE_OPEN_ERR: "FILE OPEN ERROR",
    TreeErrorCode.FILE_CLOSE_ERR: "FILE CLOSE ERROR",
    TreeErrorCode.NULLPTR_ERR: "NULL POINTER",
    TreeErrorCode.MEMORY_ALLOC_ERR: "MEMORY ALLOCATION ERROR",
    TreeErrorCode.FREAD_ERR: "FREAD ERROR: Not fully read",
    TreeErrorCode.SNPRINTF_ERR: "SNPRINTF ERROR",
    TreeErrorCode.FGETS_ERR: "FGETS ERROR",
}

_UNKNOWN = "UNKNOWN ERROR"


def errors_messenger(status):
    """Return the human-readable message for an error code."""
    try:
        code = TreeErrorCode(status)
    except ValueError:
        return _UNKNOWN
    return _MESSAGES.get(code, _UNKNOWN)


class TreeError(Exception):
    """An error carrying one of the ``TreeErrorCode`` values."""

    def __init__(self, code, detail=None):
        self.code = TreeErrorCode(code)
        self.detail = detail
        text = errors_messenger(self.code)
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)


def format_error(status, where):
    """Build the coloured report for ``status``; empty for success."""
    code = int(status)
    if code == TreeErrorCode.SUCCESS:
        return ""
    return (
        "\n"
        + paint(f"ERROR <{code}>:", Colour.RED)
        + f" {errors_messenger(code)}, "
        + paint(f"{where}.", Colour.PURPLE)
        + "\n"
    )