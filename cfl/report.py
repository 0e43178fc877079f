"""Reporting of runtime errors to standard error."""

import os
import sys


def report_runtime_error(errnum: int, file: str, line: int) -> str:
    """Write a description of ``errnum`` with its location to stderr.

    Returns the message that was written.
    """
    message = f"[{file}:{line} errno={errnum}] {os.strerror(errnum)}\n"
    sys.stderr.write(message)
    return message