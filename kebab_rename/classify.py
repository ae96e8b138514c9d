from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from kebab_rename.config import RenameConfig


def _starts_upper(name: str) -> bool:
    return bool(name) and name[0].isupper()


@dataclass(frozen=True)
class StructuralClassifier:
    """Accept any name with a leading capital and at least one more capital.

    Loose: ``MyClass`` passes while single-word components such as ``Button``
    do not.
    """

    def is_component(self, name: str) -> bool:
        if not _starts_upper(name) or not name.isidentifier():
            return False
        return any(char.isupper() for char in name[1:])


@dataclass(frozen=True)
class AllowlistClassifier:
    prefixes: Tuple[str, ...]
    reserved_suffixes: Tuple[str, ...]
    reserved_substrings: Tuple[str, ...]

    def is_component(self, name: str) -> bool:
        if not _starts_upper(name):
            return False
        if not name.isidentifier():
            return False
        # all-caps constants (SOURCE, API_URL)
        if name.upper() == name:
            return False
        if name.endswith(self.reserved_suffixes):
            return False
        if any(part in name for part in self.reserved_substrings):
            return False
        return name.startswith(self.prefixes)


Classifier = Union[AllowlistClassifier, StructuralClassifier]


def make_classifier(config: RenameConfig) -> Classifier:
    if config.policy == "structural":
        return StructuralClassifier()
    return AllowlistClassifier(
        prefixes=config.component_prefixes,
        reserved_suffixes=config.reserved_suffixes,
        reserved_substrings=config.reserved_substrings,
    )
