from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Tuple

from kebab_rename.errors import FileRewriteError
from kebab_rename.scanner import MODULE_PATH_RE, path_segments, strip_comments


def _path_edits(text: str, renames: Mapping[str, str]) -> List[Tuple[int, int, str]]:
    edits: List[Tuple[int, int, str]] = []
    for match in MODULE_PATH_RE.finditer(strip_comments(text)):
        for stem, start, end in path_segments(match.group("path"), match.start("path")):
            new = renames.get(stem)
            if new is not None and new != stem:
                edits.append((start, end, new))
    return edits


def rewrite_text(text: str, renames: Mapping[str, str]) -> str:
    """Rewrite module-path segments named after renamed components.

    Only quoted paths of an import/export statement (``from "..."``), a bare
    ``import "..."`` or an ``import(...)`` call are touched, and only
    segments whose stem equals a key exactly, so ``AccordionTrigger`` is never
    affected by the ``Accordion`` entry. Bound names are left alone;
    ``accordion-trigger`` would not be a valid binding.
    """
    edits = _path_edits(text, renames)
    if not edits:
        return text

    pieces: List[str] = []
    cursor = 0
    for start, end, new in edits:
        pieces.append(text[cursor:start])
        pieces.append(new)
        cursor = end
    pieces.append(text[cursor:])
    return "".join(pieces)


def rewrite_file(path: Path, renames: Mapping[str, str]) -> bool:
    """Rewrite ``path`` in place; returns True if the file was written.

    Bytes that are not UTF-8 (latin-1 comments in legacy files) pass through
    unchanged.
    """
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise FileRewriteError(f"Cannot read {path}: {exc}") from exc

    updated = rewrite_text(content, renames)
    if updated == content:
        return False

    try:
        with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(updated)
    except OSError as exc:
        raise FileRewriteError(f"Cannot write {path}: {exc}") from exc
    return True
