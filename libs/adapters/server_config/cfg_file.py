from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

from ports.server_config import ServerConfigPort

LOG: Final = logging.getLogger("zenit.server_config")

_ASSIGN = re.compile(r'^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*("[^"]*"|[^;]*?)\s*;')


def _strip_comment(line: str) -> str:
    in_str = False
    for i, ch in enumerate(line):
        if ch == '"':
            in_str = not in_str
        elif not in_str and line.startswith("//", i):
            return line[:i]
    return line


def _brace_delta(line: str) -> int:
    """Net `{` minus `}` outside quoted strings."""
    in_str = False
    delta = 0
    for ch in line:
        if ch == '"':
            in_str = not in_str
        elif not in_str:
            if ch == "{":
                delta += 1
            elif ch == "}":
                delta -= 1
    return delta


def parse_server_cfg(text: str) -> dict[str, str]:
    """
    Top-level `key = value;` pairs of a serverDZ.cfg-style file.
    Keys are lower-cased; entries inside `class X { ... };` blocks are skipped.
    """
    out: dict[str, str] = {}
    depth = 0
    for raw in text.splitlines():
        line = _strip_comment(raw)
        if depth == 0:
            m = _ASSIGN.match(line)
            if m:
                value = m.group(2)
                if len(value) >= 2 and value[0] == value[-1] == '"':
                    value = value[1:-1]
                out.setdefault(m.group(1).lower(), value)
        depth += _brace_delta(line)
        depth = max(depth, 0)
    return out


class ServerCfgFile(ServerConfigPort):
    """Reads the file on every lookup so edits between restarts are seen."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _values(self) -> dict[str, str]:
        try:
            text = self.path.read_text("utf-8", errors="replace")
        except OSError as ex:
            LOG.debug("Cannot read %s: %r", self.path, ex)
            return {}
        return parse_server_cfg(text)

    def get_int(self, key: str, default: int = 0) -> int:
        raw = self._values().get(key.lower())
        if raw is None:
            return default
        try:
            return int(raw, 10)
        except ValueError:
            return default
