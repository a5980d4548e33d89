"""
Streaming gzip compression and decompression of single files.

Output is written to a temporary file beside the destination and renamed
into place only once the whole stream has been transformed, so a failed
transform never leaves a truncated output behind.
"""

import contextlib
import gzip
import os
import shutil
import tempfile
import zlib
from dataclasses import dataclass

from .config import DEFAULT_COMPRESSLEVEL, Mode
from .errors import CodecError


GZIP_SUFFIX = ".gz"
CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class TransformResult:
    """Paths and byte counts of a completed transform."""

    output_path: str
    bytes_read: int
    bytes_written: int


def output_path_for(path: str, mode: Mode) -> str:
    """
    Return the destination path for a source file.

    Args:
        path: Source file path
        mode: Mode.GZIP appends .gz, Mode.GUNZIP strips it

    Returns:
        Destination path beside the source
    """
    if mode is Mode.GZIP:
        return f"{path}{GZIP_SUFFIX}"
    if not path.endswith(GZIP_SUFFIX):
        raise ValueError(f"Cannot derive a decompressed name for '{path}': missing {GZIP_SUFFIX}")
    return path[:-len(GZIP_SUFFIX)]


def _compress_into(path: str, tmp, compresslevel: int):
    mtime = os.stat(path).st_mtime
    with open(path, 'rb') as f_in:
        with gzip.GzipFile(filename=os.path.basename(path), mode='wb', fileobj=tmp,
                           compresslevel=compresslevel, mtime=mtime) as f_out:
            shutil.copyfileobj(f_in, f_out, CHUNK_SIZE)


def _decompress_into(path: str, tmp):
    if os.path.getsize(path) == 0:
        raise CodecError(path, "file is empty, expected gzip data", CodecError.MALFORMED)
    with gzip.open(path, 'rb') as f_in:
        shutil.copyfileobj(f_in, tmp, CHUNK_SIZE)


def transform_file(
    path: str,
    mode: Mode,
    overwrite: bool = False,
    compresslevel: int = DEFAULT_COMPRESSLEVEL,
) -> TransformResult:
    """
    Compress or decompress one file.

    Args:
        path: Source file
        mode: Direction of the transform
        overwrite: Replace the destination if it already exists
        compresslevel: Deflate level for Mode.GZIP

    Returns:
        TransformResult describing the written output

    Raises:
        CodecError: If the source is not valid gzip data (decompress), the
            destination exists and overwrite is off, or any I/O fails
    """
    try:
        output_path = output_path_for(path, mode)
    except ValueError as e:
        raise CodecError(path, e, CodecError.IO) from e

    if os.path.exists(path) and not os.path.isfile(path):
        raise CodecError(path, "not a regular file", CodecError.IO)

    if not overwrite and os.path.lexists(output_path):
        raise CodecError(path, f"output '{output_path}' already exists", CodecError.EXISTS)

    directory = os.path.dirname(os.path.abspath(output_path))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='wb',
            dir=directory,
            prefix=f".{os.path.basename(output_path)}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            if mode is Mode.GZIP:
                _compress_into(path, tmp, compresslevel)
            else:
                _decompress_into(path, tmp)
            tmp.flush()
            os.fsync(tmp.fileno())

        bytes_in = os.path.getsize(path)
        bytes_out = os.path.getsize(tmp_path)
        shutil.copystat(path, tmp_path)
        os.replace(tmp_path, output_path)
        tmp_path = None
    except CodecError:
        raise
    except (gzip.BadGzipFile, EOFError, zlib.error) as e:
        raise CodecError(path, e, CodecError.MALFORMED) from e
    except OSError as e:
        raise CodecError(path, e, CodecError.IO) from e
    finally:
        if tmp_path is not None:
            # Cleanup never replaces the error being raised
            with contextlib.suppress(OSError):
                os.remove(tmp_path)

    return TransformResult(output_path, bytes_in, bytes_out)
