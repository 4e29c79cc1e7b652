# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while loading and parsing INI files."""

from __future__ import annotations

from pathlib import Path


class IniError(Exception):
    """Base class for all iniblocks errors."""


class IniLoadError(IniError):
    """The INI file could not be opened or read."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to load INI file {self.path}: {message}")


class IniParseError(IniError, ValueError):
    """A line of the INI file is not valid.

    ``line_number`` is 1-based and counts physical lines of the raw file,
    so it still points at the right place after comments have been removed.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}")
