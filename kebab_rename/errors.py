from __future__ import annotations


class RenameError(RuntimeError):
    pass


class ConfigError(RenameError):
    pass


class DirectoryReadError(RenameError):
    pass


class FileRewriteError(RenameError):
    pass


class RenameCollisionError(RenameError):
    pass
