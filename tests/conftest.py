from pathlib import Path
from typing import Dict, List

import pytest

from kebab_rename.classify import make_classifier
from kebab_rename.config import RenameConfig


def _write_tree(root: Path, files: Dict[str, str]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _list_tree(root: Path) -> List[str]:
    return sorted(path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file())


@pytest.fixture
def write_tree():
    return _write_tree


@pytest.fixture
def list_tree():
    return _list_tree


@pytest.fixture
def classifier():
    return make_classifier(RenameConfig())


@pytest.fixture
def components_dir(tmp_path):
    path = tmp_path / "components" / "ui"
    path.mkdir(parents=True)
    return path
