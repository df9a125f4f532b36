"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success: every file parsed, dialogue pass completed
  1   Violation: one or more files were skipped, or the dialogue pass failed
  2   Error: usage error, missing input file, unreadable host table
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
