"""Read and write precomputed hunks as YAML.

File layout::

    hunks:
      - [[0, null], [1, 1]]
      - [[null, 5]]

Each hunk is a list of ``[left, right]`` zero-based line indices; ``null``
marks the side that has no line in that row.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from inlinediff.diff.models import Hunk, LinePair


class HunkFileError(Exception):
    """Raised when a hunk file is unreadable or malformed."""


def _parse_index(value: Any, where: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise HunkFileError(f"{where}: line index must be a non-negative integer or null, got {value!r}")
    return value


def _parse_pair(entry: Any, where: str) -> LinePair:
    if not isinstance(entry, (list, tuple)) or len(entry) != 2:
        raise HunkFileError(f"{where}: expected a [left, right] pair, got {entry!r}")
    lhs = _parse_index(entry[0], where)
    rhs = _parse_index(entry[1], where)
    if lhs is None and rhs is None:
        raise HunkFileError(f"{where}: both sides are null")
    return (lhs, rhs)


def parse_hunks(data: Any) -> List[Hunk]:
    """Build hunks from an already-decoded YAML document."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("hunks", [])
    if not isinstance(data, list):
        raise HunkFileError("expected a list of hunks")

    hunks: List[Hunk] = []
    for h_idx, entry in enumerate(data, start=1):
        if not isinstance(entry, list):
            raise HunkFileError(f"hunk {h_idx}: expected a list of line pairs")
        pairs = tuple(
            _parse_pair(pair, f"hunk {h_idx}, row {r_idx}")
            for r_idx, pair in enumerate(entry, start=1)
        )
        hunks.append(Hunk(lines=pairs))
    return hunks


def load_hunks(path: Path) -> List[Hunk]:
    """Load hunks from the YAML file at *path*."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise HunkFileError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise HunkFileError(f"Failed to parse {path}: {exc}") from exc
    return parse_hunks(data)


def dump_hunks(hunks: Sequence[Hunk]) -> str:
    """Serialise *hunks* in the layout :func:`load_hunks` reads."""
    doc = {"hunks": [[list(pair) for pair in hunk.lines] for hunk in hunks]}
    return yaml.safe_dump(doc, default_flow_style=None, sort_keys=False)
