"""Shared fixtures for iniblocks tests."""

from __future__ import annotations

import pytest

SAMPLE_INI = """\
[Block1]
;A comment line
key1=val1
key2=val2 ;A comment at the end of line
key3=valwith; a comment
key3=val with more words

[Block2]
;this = should't load
key1b2=123"""

SAMPLE_STRIPPED = """\
[Block1]
key1=val1
key2=val2
key3=valwith; a comment
key3=val with more words

[Block2]
key1b2=123"""


@pytest.fixture(autouse=True)
def _isolate_cwd(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory so no stray .iniblocks.toml or conf.ini is picked up."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def sample_ini(tmp_path):
    """Create the sample INI file and return its path."""
    p = tmp_path / "sample.ini"
    p.write_bytes(SAMPLE_INI.encode())
    return p


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_INI


@pytest.fixture()
def expected_stripped() -> bytes:
    return SAMPLE_STRIPPED.encode()
