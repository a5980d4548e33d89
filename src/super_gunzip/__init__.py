"""
super-gunzip: parallel gzip compression and decompression by glob pattern
"""

import re
from pathlib import Path

def _get_version_from_pyproject():
    """Get version from pyproject.toml file."""
    # Get the project root containing src/super_gunzip/__init__.py
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"

    try:
        content = pyproject_path.read_text()
    except OSError:
        content = ""

    # Extract version using regex
    match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
    if match:
        return match.group(1)

    # Fallback version if pyproject.toml can't be read
    return "1.0.0"

__version__ = _get_version_from_pyproject()

from .config import Mode, RunConfig, build_run_config
from .errors import CodecError, ConfigError, DeleteError, PatternError
from .results import Outcome, OutcomeStatus, ResultAggregator, Summary
from .worker_pool import run_batch, run_jobs
from .main import main

__all__ = [
    "main",
    "Mode",
    "RunConfig",
    "build_run_config",
    "CodecError",
    "ConfigError",
    "DeleteError",
    "PatternError",
    "Outcome",
    "OutcomeStatus",
    "ResultAggregator",
    "Summary",
    "run_batch",
    "run_jobs",
]
