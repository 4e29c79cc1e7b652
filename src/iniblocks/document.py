# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse INI files into named blocks of key-value pairs.

Handles:
  - ``[name]`` block headers (name made of letters, digits, ``_``, ``$``, ``-``)
  - ``key=value`` pairs (only the first ``=`` splits, a repeated key wins)
  - whole-line ``;`` comments
  - end-of-line ``;`` comments preceded by a space, tab or ``]``
  - ``;`` inside a value with no blank before it (kept as literal text)
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from iniblocks.errors import IniLoadError, IniParseError

logger = logging.getLogger(__name__)

LINE_END = b"\n"
WINDOWS_LINE_END = b"\r\n"
COMMENT_START = ";"
KEY_VALUE_SEP = "="

_COMMENT = ord(COMMENT_START)
_BLANKS = b" \t"
_CLOSE_BRACKET = ord("]")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_$-")


@dataclass
class Block:
    """One ``[name]`` section: its comment-free lines and its key-value pairs."""

    name: str
    content: bytes = b""
    data: dict[str, str] = field(default_factory=dict)

    def append_content(self, line: bytes) -> None:
        self.content += line

    def add_data(self, key: str, value: str) -> None:
        self.data[key] = value


@dataclass
class Document:
    """An INI file held in memory.

    ``raw`` is the file as read. ``stripped`` and ``blocks`` stay empty until
    :meth:`parse` is called, and every call rebuilds both from ``raw``.
    """

    raw: bytes = b""
    stripped: bytes = b""
    blocks: dict[str, Block] = field(default_factory=dict)
    path: Path | None = None
    encoding: str = "utf-8"

    def lines(self, stripped: bool = False) -> list[bytes]:
        """Return the lines of the raw (or comment-stripped) content.

        Each line keeps its ``\\n``, so a blank line in the file is ``b"\\n"``.
        """
        return split_lines(self.stripped if stripped else self.raw)

    def parse(self, *, strict: bool = True) -> None:
        """Remove comments, then split the result into blocks.

        With ``strict`` a non-blank line inside a block that is neither a
        header nor a ``key=value`` pair raises :class:`IniParseError`;
        otherwise it is logged and skipped. A key containing ``;`` always
        raises. A failed parse leaves ``stripped`` and ``blocks`` untouched.
        """
        kept = _strip_lines(self.lines())
        stripped = b"".join(line for _, line in kept)
        blocks = self._extract_blocks(kept, strict)
        self.stripped, self.blocks = stripped, blocks
        logger.debug(
            "Parsed %s: %d line(s) after stripping comments, %d block(s)",
            self.path or "<memory>", len(kept), len(self.blocks),
        )

    def get_block(self, name: str) -> Block | None:
        return self.blocks.get(name)

    def get_block_data(self, name: str) -> dict[str, str] | None:
        """Return the key-value pairs of block *name*, or ``None`` if there is no such block."""
        block = self.blocks.get(name)
        if block is None:
            return None
        return block.data

    def _extract_blocks(self, kept: list[tuple[int, bytes]], strict: bool) -> dict[str, Block]:
        blocks: dict[str, Block] = {}
        current: Block | None = None
        for number, line in kept:
            text = self._decode(number, line).strip()
            name = header_name(text)
            if name is not None:
                if current is not None:
                    blocks[current.name] = current
                current = Block(name=name)
                current.append_content(line)
                continue
            if current is None:
                # Nothing to attach to before the first header.
                continue
            key, sep, value = text.partition(KEY_VALUE_SEP)
            if sep:
                if not valid_key(key):
                    raise IniParseError(
                        number, text, f"a key can not contain the '{COMMENT_START}' character in its name"
                    )
                current.append_content(line)
                current.add_data(key, value)
            elif text:
                if strict:
                    raise IniParseError(
                        number, text, f"expected a [block] header or a key{KEY_VALUE_SEP}value pair"
                    )
                logger.warning("Skipping line %d in block [%s]: %r", number, current.name, text)
        if current is not None:
            blocks[current.name] = current
        return blocks

    def _decode(self, number: int, line: bytes) -> str:
        try:
            return line.decode(self.encoding)
        except UnicodeDecodeError as e:
            text = line.decode(self.encoding, errors="replace").rstrip("\n")
            raise IniParseError(number, text, f"line is not valid {self.encoding}") from e


def split_lines(buf: bytes) -> list[bytes]:
    """Split *buf* after every ``\\n``; a trailing unterminated line is kept as-is."""
    lines: list[bytes] = []
    start = 0
    while start < len(buf):
        end = buf.find(LINE_END, start)
        if end == -1:
            lines.append(buf[start:])
            break
        lines.append(buf[start : end + 1])
        start = end + 1
    return lines


def strip_comments(buf: bytes) -> bytes:
    """Return *buf* with every comment removed."""
    return b"".join(line for _, line in _strip_lines(split_lines(buf)))


def _strip_lines(lines: Iterable[bytes]) -> list[tuple[int, bytes]]:
    """Strip comments from each line, pairing what is left with its 1-based line number."""
    kept: list[tuple[int, bytes]] = []
    for number, line in enumerate(lines, start=1):
        if line[0] == _COMMENT:
            continue
        kept.append((number, _strip_line(line)))
    return kept


def _strip_line(line: bytes) -> bytes:
    for i in range(1, len(line)):
        if line[i] != _COMMENT:
            continue
        before = line[i - 1]
        if before in _BLANKS:
            # The blank in front of the comment goes with it.
            return line[: i - 1] + LINE_END
        if before == _CLOSE_BRACKET:
            return line[:i] + LINE_END
    return line


def header_name(text: str) -> str | None:
    """Return the block name if *text* is exactly ``[name]``, else ``None``."""
    if len(text) < 3 or text[0] != "[" or text[-1] != "]":
        return None
    name = text[1:-1]
    if all(ch in _NAME_CHARS for ch in name):
        return name
    return None


def valid_key(key: str) -> bool:
    return COMMENT_START not in key


def loads(data: bytes | str, *, normalize_crlf: bool = False, encoding: str = "utf-8") -> Document:
    """Build an unparsed :class:`Document` from in-memory content."""
    if isinstance(data, str):
        data = data.encode(encoding)
    if normalize_crlf:
        data = data.replace(WINDOWS_LINE_END, LINE_END)
    return Document(raw=data, encoding=encoding)


def load(path: str | Path, *, normalize_crlf: bool = False, encoding: str = "utf-8") -> Document:
    """Read the INI file at *path* into an unparsed :class:`Document`.

    Call :meth:`Document.parse` on the result to strip comments and build the
    blocks. Raises :class:`IniLoadError` if the file cannot be read.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise IniLoadError(path, e.strerror or str(e)) from e
    logger.debug("Read %d byte(s) from %s", len(data), path)
    doc = loads(data, normalize_crlf=normalize_crlf, encoding=encoding)
    doc.path = path
    return doc
