"""Filesystem loader for trader config files."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from traderfmt.diagnostics import IO_INVALID_PATH, IO_READ_FAILED, Diagnostic
from traderfmt.errors import InvalidPathError, SourceReadError
from traderfmt.logging_setup import get_logger

logger = get_logger(__name__)


def load_source(path: str | PathLike[str]) -> str:
    """Read a whole config file as text.

    The path must name an existing regular file; nothing is read otherwise.
    A leading byte-order mark is dropped.
    """
    source_path = Path(path)
    if not source_path.is_file():
        raise InvalidPathError(
            Diagnostic.from_spec(IO_INVALID_PATH, detail=f"`{source_path}` is not an existing file.")
        )

    try:
        decoded = source_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(Diagnostic.from_spec(IO_READ_FAILED, detail=f"{exc}")) from exc

    logger.debug("Read %d character(s) from %s", len(decoded), source_path)
    return decoded.removeprefix("\ufeff")
