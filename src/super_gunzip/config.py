"""
Run configuration for batch gzip/gunzip operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import ConfigError
from .utils import print_status


DEFAULT_THREADS = 1
DEFAULT_COMPRESSLEVEL = 6


class Mode(Enum):
    """Direction of the gzip transform."""

    GZIP = "gzip"
    GUNZIP = "gunzip"

    @classmethod
    def parse(cls, value: Union[str, "Mode"]) -> "Mode":
        """
        Convert a mode name to a Mode.

        Args:
            value: A Mode, or one of "gzip", "gunzip" or "unzip"

        Returns:
            The matching Mode

        Raises:
            ConfigError: If the name is not recognized
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "unzip":
            name = "gunzip"
        try:
            return cls(name)
        except ValueError:
            raise ConfigError(
                f"Unknown mode '{value}': expected 'gzip' or 'gunzip'"
            ) from None


@dataclass(frozen=True)
class RunConfig:
    """Validated, read-only settings shared by every worker in a run."""

    mode: Mode
    pattern: str
    thread_count: int = DEFAULT_THREADS
    keep_original: bool = False
    overwrite: bool = False
    compresslevel: int = DEFAULT_COMPRESSLEVEL
    show_progress: bool = True

    def __post_init__(self):
        if not isinstance(self.mode, Mode):
            raise ConfigError(f"mode must be a Mode, got {self.mode!r}")
        if self.thread_count < 1:
            raise ConfigError(
                f"thread_count must be at least 1, got {self.thread_count}"
            )
        if not 0 <= self.compresslevel <= 9:
            raise ConfigError(
                f"compresslevel must be between 0 and 9, got {self.compresslevel}"
            )


def build_run_config(
    mode: Union[str, Mode],
    pattern: str,
    thread_count: Optional[int] = None,
    keep_original: bool = False,
    overwrite: bool = False,
    compresslevel: int = DEFAULT_COMPRESSLEVEL,
    show_progress: bool = True,
    strict: bool = False,
) -> RunConfig:
    """
    Normalize raw option values into a RunConfig.

    A missing thread count means a single worker. A thread count below 1 is
    clamped to 1 with a warning, unless strict is set, in which case it is
    rejected.

    Args:
        mode: "gzip", "gunzip"/"unzip", or a Mode
        pattern: Glob pattern selecting the files to process
        thread_count: Number of concurrent workers
        keep_original: Keep source files after a successful transform
        overwrite: Replace outputs that already exist
        compresslevel: Deflate level used when compressing (0-9)
        show_progress: Print a progress bar while the pool runs
        strict: Raise instead of clamping an invalid thread count

    Returns:
        An immutable RunConfig

    Raises:
        ConfigError: If a value cannot be used
    """
    parsed_mode = Mode.parse(mode)

    if thread_count is None:
        thread_count = DEFAULT_THREADS
    elif thread_count < 1:
        if strict:
            raise ConfigError(f"Thread count must be at least 1, got {thread_count}")
        print_status(f"Thread count {thread_count} is not positive, using 1 thread", "[WARN]")
        thread_count = 1

    return RunConfig(
        mode=parsed_mode,
        pattern=pattern,
        thread_count=thread_count,
        keep_original=keep_original,
        overwrite=overwrite,
        compresslevel=compresslevel,
        show_progress=show_progress,
    )
