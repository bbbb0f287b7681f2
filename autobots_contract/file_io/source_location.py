from __future__ import annotations

from dataclasses import dataclass
import os
import re
from pathlib import Path
from typing import Dict, Optional

from ..models.parsing.yaml_parser import json_pointer_escape

_SEGMENT_RE = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def finding_path_to_pointer(path: str) -> str:
    """Convert a finding path to a JSON pointer.

    ``spec.bindings.tests[1].covers[0]`` -> ``/spec/bindings/tests/1/covers/0``
    """
    tokens = []
    for match in _SEGMENT_RE.finditer(path or ""):
        key, index = match.groups()
        token = key if key is not None else index
        tokens.append(json_pointer_escape(token))
    return "".join(f"/{t}" for t in tokens)


def lookup_source(source_map: Optional[Dict[str, Dict[str, int]]], yaml_path: Optional[str]) -> SourceLocation:
    """Find the location of *yaml_path*, falling back to its closest ancestor.

    Missing fields have no node of their own, so they are located at the
    mapping that should contain them.
    """
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    candidate = yaml_path
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                yaml_path=yaml_path,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not candidate:
            return SourceLocation(yaml_path=yaml_path)
        candidate = candidate.rsplit("/", 1)[0]


def _format_file_path(path: Path) -> str:
    root = os.environ.get("AUTOBOTS_SOURCE_ROOT")
    if not root:
        return str(path)
    try:
        return str(path.resolve().relative_to(Path(root).resolve()))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = _format_file_path(loc.file_path)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {file_path}:{loc.line} ")
        else:
            parts.append(f"source= {file_path} ")

    if loc.yaml_path:
        parts.append(f"yaml_path={loc.yaml_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
