# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".iniblocks.toml configuration loading.

Searches upward from cwd for ``.iniblocks.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".iniblocks.toml"


@dataclass
class IniblocksConfig:
    """Resolved parser settings for the current invocation."""

    normalize_crlf: bool = False
    strict: bool = True
    encoding: str = "utf-8"
    config_path: Path | None = None


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.iniblocks.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> IniblocksConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return IniblocksConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("iniblocks", {})

    encoding = section.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise ValueError(f"{path}: encoding must be a string, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValueError(f"{path}: unknown encoding {encoding!r}") from None

    return IniblocksConfig(
        normalize_crlf=bool(section.get("normalize_crlf", False)),
        strict=bool(section.get("strict", True)),
        encoding=encoding,
        config_path=path,
    )
