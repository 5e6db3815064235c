from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[SourceMap], yaml_path: Optional[str]) -> SourceLocation:
    """Resolve a JSON pointer to its location, walking up to the nearest known parent."""
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    probe = yaml_path
    while True:
        entry = source_map.get(probe)
        if entry:
            return SourceLocation(yaml_path=yaml_path, line=entry.get("line"), column=entry.get("column"))
        if not probe:
            return SourceLocation(yaml_path=yaml_path)
        # Missing keys have no node of their own; report the enclosing container.
        probe = probe.rsplit("/", 1)[0]


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {loc.file_path}:{loc.line} ")
        else:
            parts.append(f"source= {loc.file_path} ")

    if loc.yaml_path:
        parts.append(f"yaml_path={loc.yaml_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
