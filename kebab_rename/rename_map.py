from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from kebab_rename.casing import to_kebab_case
from kebab_rename.classify import Classifier, make_classifier
from kebab_rename.config import RenameConfig
from kebab_rename.errors import DirectoryReadError
from kebab_rename.scanner import find_references


@dataclass(frozen=True)
class RenameEntry:
    old: str
    new: str
    source: Optional[Path] = None
    offset: Optional[int] = None


class RenameMap(Mapping[str, str]):
    """Read-only old -> new identifier mapping.

    Built once per run by ``build_rename_map`` (or directly from a dict in
    tests) and only read afterwards.
    """

    def __init__(self, entries: Tuple[RenameEntry, ...] = ()) -> None:
        self._entries: Dict[str, RenameEntry] = {}
        for entry in entries:
            if entry.old in self._entries:
                raise ValueError(f"Duplicate rename entry for {entry.old!r}")
            self._entries[entry.old] = entry

    @classmethod
    def from_dict(cls, renames: Mapping[str, str]) -> "RenameMap":
        return cls(tuple(RenameEntry(old=old, new=new) for old, new in renames.items()))

    def __getitem__(self, old: str) -> str:
        return self._entries[old].new

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RenameMap({dict(self)!r})"

    def entry(self, old: str) -> RenameEntry:
        return self._entries[old]

    def entries(self) -> Tuple[RenameEntry, ...]:
        return tuple(self._entries.values())


@dataclass
class RenameMapBuilder:
    """Accumulates entries; the first discovery of a name wins."""

    _entries: Dict[str, RenameEntry] = field(default_factory=dict)

    def add(self, name: str, source: Optional[Path] = None, offset: Optional[int] = None) -> bool:
        if name in self._entries:
            return False
        self._entries[name] = RenameEntry(
            old=name, new=to_kebab_case(name), source=source, offset=offset
        )
        return True

    def freeze(self) -> RenameMap:
        return RenameMap(tuple(self._entries.values()))


@dataclass(frozen=True)
class BuildResult:
    renames: RenameMap
    skipped: Tuple[Tuple[Path, str], ...] = ()


def list_dir(directory: Path) -> List[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        raise DirectoryReadError(f"Cannot read directory {directory}: {exc}") from exc


def _scan_tree(
    directory: Path,
    config: RenameConfig,
    classifier: Classifier,
    builder: RenameMapBuilder,
    skipped: List[Tuple[Path, str]],
) -> None:
    entries = list_dir(directory)
    for path in entries:
        if not path.is_file() or not config.is_eligible(path):
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            skipped.append((path, str(exc)))
            continue
        for reference in find_references(content, classifier):
            builder.add(reference.name, source=path, offset=reference.offset)

    for path in entries:
        if path.is_dir() and not path.is_symlink():
            _scan_tree(path, config, classifier, builder, skipped)


def build_rename_map(root: Path, config: Optional[RenameConfig] = None) -> BuildResult:
    """Scan every eligible file under ``root`` and collect component renames.

    Files that cannot be read are skipped and listed in the
    result; an unreadable directory raises ``DirectoryReadError``.
    """
    config = config or RenameConfig()
    classifier = make_classifier(config)
    builder = RenameMapBuilder()
    skipped: List[Tuple[Path, str]] = []
    _scan_tree(root, config, classifier, builder, skipped)
    return BuildResult(renames=builder.freeze(), skipped=tuple(skipped))
