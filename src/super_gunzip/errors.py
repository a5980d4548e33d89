"""
Exception types raised by super-gunzip.

PatternError and ConfigError are fatal and stop a run before any file is
touched. CodecError and DeleteError belong to a single file and are turned
into failure outcomes by the worker pool.
"""


class SuperGunzipError(Exception):
    """Base class for all super-gunzip errors."""


class PatternError(SuperGunzipError):
    """The glob pattern is syntactically invalid."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")


class ConfigError(SuperGunzipError):
    """A run configuration value is out of range."""


class CodecError(SuperGunzipError):
    """
    Compressing or decompressing a single file failed.

    Attributes:
        path: The source file being transformed
        cause: The underlying exception, if any
        kind: One of "malformed", "exists" or "io"
    """

    MALFORMED = "malformed"
    EXISTS = "exists"
    IO = "io"

    def __init__(self, path: str, cause, kind: str = IO):
        self.path = path
        self.cause = cause
        self.kind = kind
        super().__init__(f"{path}: {kind} error: {cause}")


class DeleteError(SuperGunzipError):
    """The source file could not be removed after a successful transform."""

    def __init__(self, path: str, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: could not delete original: {cause}")
