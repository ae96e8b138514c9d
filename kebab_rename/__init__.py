"""
Rename capitalized component files to kebab-case and rewrite their imports.
"""

from kebab_rename.casing import to_kebab_case
from kebab_rename.classify import AllowlistClassifier, StructuralClassifier, make_classifier
from kebab_rename.config import RenameConfig, find_components_dir, load_config
from kebab_rename.errors import (
    ConfigError,
    DirectoryReadError,
    FileRewriteError,
    RenameCollisionError,
    RenameError,
)
from kebab_rename.processor import ChangeLog, process_tree
from kebab_rename.rename_map import RenameEntry, RenameMap, build_rename_map
from kebab_rename.rewriter import rewrite_file, rewrite_text
from kebab_rename.scanner import Reference, find_references, scan, strip_comments

__version__ = "0.1.0"

__all__ = [
    "AllowlistClassifier",
    "ChangeLog",
    "ConfigError",
    "DirectoryReadError",
    "FileRewriteError",
    "Reference",
    "RenameCollisionError",
    "RenameConfig",
    "RenameEntry",
    "RenameError",
    "RenameMap",
    "StructuralClassifier",
    "build_rename_map",
    "find_components_dir",
    "find_references",
    "load_config",
    "make_classifier",
    "process_tree",
    "rewrite_file",
    "rewrite_text",
    "scan",
    "strip_comments",
    "to_kebab_case",
]
