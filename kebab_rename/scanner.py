from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from kebab_rename.classify import Classifier

BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/|<!--.*?-->", re.DOTALL)
# "://" inside URLs is not a comment marker
LINE_COMMENT_RE = re.compile(r"(?<![:\\])//.*$", re.MULTILINE)

_IDENT = r"[A-Za-z_$][\w$]*"

DEFAULT_IMPORT_RE = re.compile(
    rf"(?<![\w$.])import\s+(?:type\s+)?(?P<name>{_IDENT})\s*(?:,|\bfrom\b)"
)
NAMESPACE_RE = re.compile(
    rf"(?<![\w$.])(?:import|export)\s+(?:{_IDENT}\s*,\s*)?\*\s*as\s+(?P<name>{_IDENT})"
)
NAMED_IMPORT_RE = re.compile(
    rf"(?<![\w$.])import\s+(?:type\s+)?(?:{_IDENT}\s*,\s*)?\{{(?P<names>[^{{}}]*)\}}\s*from\b"
)
NAMED_EXPORT_RE = re.compile(
    r"(?<![\w$.])export\s+(?:type\s+)?\{(?P<names>[^{}]*)\}\s*from\b"
)
# a quoted path belongs to an import/export statement: the clause before "from"
# never holds quotes, semicolons, markup brackets or call parentheses
MODULE_PATH_RE = re.compile(
    r"""(?P<lead>(?<![\w$.])(?:(?:import|export)\b[^;'"<>()]*?\bfrom\s*|import\s*\(\s*|import\s+))(?P<quote>['"])(?P<path>[^'"\n]*)(?P=quote)"""
)
SPECIFIER_RE = re.compile(r"[^,]+")
ALIAS_RE = re.compile(rf"^(?:type\s+)?(?P<original>{_IDENT})(?:\s+as\s+(?P<alias>{_IDENT}))?$")


@dataclass(frozen=True)
class Reference:
    name: str
    offset: int


def _blank(match: re.Match) -> str:
    return re.sub(r"[^\n]", " ", match.group(0))


def strip_comments(text: str) -> str:
    """Blank out block and line comments.

    Comment characters are replaced by spaces so offsets into the result
    still point at the same place in the original text.
    """
    text = BLOCK_COMMENT_RE.sub(_blank, text)
    return LINE_COMMENT_RE.sub(_blank, text)


def _split_specifiers(names: str, base: int) -> Iterator[Tuple[str, int]]:
    for item in SPECIFIER_RE.finditer(names):
        raw = item.group(0)
        specifier = raw.strip()
        if not specifier:
            continue
        match = ALIAS_RE.match(specifier)
        if match is None:
            continue
        offset = base + item.start() + (len(raw) - len(raw.lstrip()))
        original = match.group("original")
        if original == "default":
            # export { default as Accordion } from './Accordion.vue'
            alias = match.group("alias")
            if alias:
                yield alias, offset + specifier.index(alias, len("default"))
            continue
        yield original, offset + specifier.index(original)


def segment_stem(name: str) -> str:
    """Name up to the first dot: ``Button.stories.ts`` -> ``Button``."""
    return name.split(".", 1)[0]


def path_segments(path: str, base: int = 0) -> Iterator[Tuple[str, int, int]]:
    """Yield ``(stem, start, end)`` for each segment of a module path.

    ``Button.vue`` has the stem ``Button``; ``.`` and ``..`` have no stem and
    are skipped.
    """
    position = 0
    for segment in path.split("/"):
        stem = segment_stem(segment)
        if stem:
            start = base + position
            yield stem, start, start + len(stem)
        position += len(segment) + 1


def _candidates(text: str) -> Iterator[Tuple[str, int]]:
    for pattern in (DEFAULT_IMPORT_RE, NAMESPACE_RE):
        for match in pattern.finditer(text):
            yield match.group("name"), match.start("name")

    for pattern in (NAMED_IMPORT_RE, NAMED_EXPORT_RE):
        for match in pattern.finditer(text):
            yield from _split_specifiers(match.group("names"), match.start("names"))

    for match in MODULE_PATH_RE.finditer(text):
        for stem, start, _ in path_segments(match.group("path"), match.start("path")):
            if stem[0].isupper():
                yield stem, start


def find_references(text: str, classifier: Classifier) -> List[Reference]:
    """Return component identifiers referenced by import/export statements.

    Each name appears once, at its first offset in the text.
    """
    stripped = strip_comments(text)
    first_seen: dict[str, int] = {}
    for name, offset in _candidates(stripped):
        if name in first_seen and first_seen[name] <= offset:
            continue
        if not classifier.is_component(name):
            continue
        first_seen[name] = offset
    ordered = sorted(first_seen.items(), key=lambda item: item[1])
    return [Reference(name=name, offset=offset) for name, offset in ordered]


def scan(text: str, classifier: Classifier) -> List[str]:
    return [reference.name for reference in find_references(text, classifier)]
