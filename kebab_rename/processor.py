from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from kebab_rename.config import RenameConfig
from kebab_rename.errors import RenameCollisionError, RenameError
from kebab_rename.rename_map import list_dir
from kebab_rename.rewriter import rewrite_file
from kebab_rename.scanner import segment_stem


@dataclass
class ChangeLog:
    rewritten: List[Path] = field(default_factory=list)
    renamed_files: List[Tuple[Path, Path]] = field(default_factory=list)
    renamed_dirs: List[Tuple[Path, Path]] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.rewritten or self.renamed_files or self.renamed_dirs)

    def moved(self, old: Path, new: Path) -> None:
        """Point logged paths at or below a renamed entry at their new location.

        Rename sources keep the location the entry had when it moved.
        """
        self.rewritten = [_rebase(path, old, new) for path in self.rewritten]
        self.renamed_files = [(src, _rebase(dst, old, new)) for src, dst in self.renamed_files]
        self.renamed_dirs = [(src, _rebase(dst, old, new)) for src, dst in self.renamed_dirs]


def _rebase(path: Path, old: Path, new: Path) -> Path:
    try:
        return new / path.relative_to(old)
    except ValueError:
        return path


def _move(source: Path, destination: Path) -> bool:
    if source == destination:
        return False
    if destination.exists() and not _same_entry(source, destination):
        raise RenameCollisionError(f"Cannot rename {source} -> {destination}: destination exists")
    try:
        source.rename(destination)
    except OSError as exc:
        raise RenameError(f"Failed to rename {source} -> {destination}: {exc}") from exc
    return True


def _same_entry(source: Path, destination: Path) -> bool:
    # Case-insensitive filesystems report Button.vue and button.vue as one file.
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


def _process_dir(
    directory: Path,
    renames: Mapping[str, str],
    config: RenameConfig,
    log: ChangeLog,
) -> None:
    entries = list_dir(directory)
    files = [path for path in entries if path.is_file() and config.is_eligible(path)]

    for path in files:
        if rewrite_file(path, renames):
            log.rewritten.append(path)

    # Every file at this level is rewritten before any of them moves.
    for path in files:
        stem = segment_stem(path.name)
        new_stem = renames.get(stem)
        if new_stem is None:
            continue
        destination = path.with_name(new_stem + path.name[len(stem):])
        if _move(path, destination):
            log.moved(path, destination)
            log.renamed_files.append((path, destination))

    for path in entries:
        if not path.is_dir() or path.is_symlink():
            continue
        _process_dir(path, renames, config, log)
        stem = segment_stem(path.name)
        new_stem = renames.get(stem)
        if new_stem is None:
            continue
        destination = path.with_name(new_stem + path.name[len(stem):])
        if _move(path, destination):
            log.moved(path, destination)
            log.renamed_dirs.append((path, destination))


def process_tree(
    root: Path,
    renames: Mapping[str, str],
    config: Optional[RenameConfig] = None,
) -> ChangeLog:
    """Rewrite imports in every eligible file under ``root``, then rename
    files and directories named after a component to their kebab-case form.

    Any read, write or rename failure aborts the run.
    """
    config = config or RenameConfig()
    log = ChangeLog()
    _process_dir(root, renames, config, log)
    return log
