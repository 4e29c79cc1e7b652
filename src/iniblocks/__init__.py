# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""iniblocks -- read INI files into named blocks of key-value pairs, comments stripped."""

from iniblocks.document import Block, Document, load, loads, strip_comments
from iniblocks.errors import IniError, IniLoadError, IniParseError

__all__ = [
    "__version__",
    "Block",
    "Document",
    "IniError",
    "IniLoadError",
    "IniParseError",
    "load",
    "loads",
    "strip_comments",
]
__version__ = "0.1.0"
