"""
Worker pool that runs gzip/gunzip jobs concurrently and aggregates outcomes.
"""

import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .codec import GZIP_SUFFIX, transform_file
from .config import Mode, RunConfig
from .errors import CodecError, DeleteError
from .glob_resolver import resolve_pattern
from .results import Outcome, OutcomeStatus, ResultAggregator, Summary
from .utils import print_progress, print_status


@dataclass(frozen=True)
class Job:
    """One file to transform under a shared run configuration."""

    source_path: str
    config: RunConfig


def skip_reason(path: str, mode: Mode) -> Optional[str]:
    """
    Explain why a matched path is not processed in this mode.

    Returns:
        A short reason, or None if the path should be transformed
    """
    if os.path.isdir(path):
        return "is a directory"
    # FIFOs, sockets and devices would block or never end when read
    if os.path.exists(path) and not os.path.isfile(path):
        return "not a regular file"
    if mode is Mode.GZIP and path.endswith(GZIP_SUFFIX):
        return "already compressed"
    if mode is Mode.GUNZIP and not path.endswith(GZIP_SUFFIX):
        return f"no {GZIP_SUFFIX} suffix"
    return None


def remove_source(path: str):
    """
    Delete an original file after its transform succeeded.

    Raises:
        DeleteError: If the file could not be removed
    """
    try:
        os.remove(path)
    except OSError as e:
        raise DeleteError(path, e) from e


def process_job(job: Job) -> Outcome:
    """
    Transform a single file and remove its source when requested.

    Never raises: every error is returned as a failure Outcome so that one
    bad file cannot stop the rest of the batch. A transform that succeeds but
    whose source cannot be deleted is a failure.

    Args:
        job: The file and configuration to process

    Returns:
        Exactly one Outcome for job.source_path
    """
    path = job.source_path
    config = job.config

    reason = skip_reason(path, config.mode)
    if reason:
        return Outcome(path, OutcomeStatus.SUCCESS, skipped_reason=reason)

    try:
        result = transform_file(
            path,
            config.mode,
            overwrite=config.overwrite,
            compresslevel=config.compresslevel,
        )
    except CodecError as e:
        return Outcome(path, OutcomeStatus.FAILURE, error=e)
    except Exception as e:
        return Outcome(path, OutcomeStatus.FAILURE, error=CodecError(path, e))

    if not config.keep_original:
        try:
            remove_source(path)
        except DeleteError as e:
            return Outcome(
                path,
                OutcomeStatus.FAILURE,
                error=e,
                output_path=result.output_path,
                bytes_in=result.bytes_read,
                bytes_out=result.bytes_written,
            )

    return Outcome(
        path,
        OutcomeStatus.SUCCESS,
        output_path=result.output_path,
        bytes_in=result.bytes_read,
        bytes_out=result.bytes_written,
    )


def run_jobs(
    config: RunConfig,
    paths: Sequence[str],
    aggregator: Optional[ResultAggregator] = None,
) -> Summary:
    """
    Process every path with at most config.thread_count files in flight.

    Blocks until each path has produced an outcome.

    Args:
        config: Run configuration shared by all workers
        paths: Files to process; duplicates are collapsed
        aggregator: Collector for outcomes (a new one by default)

    Returns:
        Summary of the run
    """
    if aggregator is None:
        aggregator = ResultAggregator()

    unique_paths: List[str] = list(dict.fromkeys(paths))
    if len(unique_paths) != len(paths):
        print_status(f"Ignoring {len(paths) - len(unique_paths)} duplicate paths", "[WARN]")

    start = time.monotonic()
    total = len(unique_paths)
    if total == 0:
        return aggregator.finalize(time.monotonic() - start)

    print_status(f"Starting {config.mode.value} with {config.thread_count} threads")

    # Thread-safe progress output
    progress_lock = threading.Lock()
    label = "Compressing files" if config.mode is Mode.GZIP else "Decompressing files"

    def work(job: Job):
        outcome = process_job(job)
        completed = aggregator.record(outcome)
        if config.show_progress:
            with progress_lock:
                print_progress(completed, total, label)

    with ThreadPoolExecutor(max_workers=config.thread_count,
                            thread_name_prefix="super-gunzip") as executor:
        futures = [executor.submit(work, Job(path, config)) for path in unique_paths]
        for future in as_completed(futures):
            future.result()

    return aggregator.finalize(time.monotonic() - start)


def run_batch(config: RunConfig) -> Summary:
    """
    Resolve config.pattern and process every matching file.

    Raises:
        PatternError: If the pattern is malformed; no file is touched
    """
    paths = resolve_pattern(config.pattern)
    print_status(f"Pattern '{config.pattern}' matched {len(paths)} paths")
    return run_jobs(config, paths)
