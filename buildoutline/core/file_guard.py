"""Lifetime guard for the raw build output file behind a processor.

The guard never reads or writes the file.  It only removes it, at most
once, when its owner is disposed or garbage-collected, and only when
asked to at construction.
"""

from __future__ import annotations

import logging
import weakref
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _remove_output_file(path: Path, remove: bool) -> None:
    """Finalizer body.  Must not reference the guard, or it would never be collected."""
    if not remove:
        return
    try:
        if path.exists():
            path.unlink()
            logger.info("Removed build output file %s.", path)
    except OSError as exc:
        # Must not raise: this also runs as a finalizer.
        logger.warning("Could not remove build output file %s: %s", path, exc)


class OutputFileGuard:
    """Deletes an associated file exactly once at end of life.

    Disposal is idempotent.  ``weakref.finalize`` runs its callback at
    most once, so an explicit ``dispose()`` also retires the
    garbage-collection trigger.

    Parameters
    ----------
    file_name:
        Path of the associated file.
    remove_file_on_dispose:
        Whether disposal deletes the file.
    """

    def __init__(self, file_name: Path | str, remove_file_on_dispose: bool = False) -> None:
        self._file_name = Path(file_name)
        self._remove = remove_file_on_dispose
        self._finalizer = weakref.finalize(
            self, _remove_output_file, self._file_name, remove_file_on_dispose
        )

    @property
    def file_name(self) -> Path:
        return self._file_name

    @property
    def remove_file_on_dispose(self) -> bool:
        return self._remove

    @property
    def disposed(self) -> bool:
        return not self._finalizer.alive

    def dispose(self) -> None:
        """Release the file.  Later calls are no-ops."""
        if self._finalizer.alive:
            logger.debug("Disposing output file guard for %s.", self._file_name)
        self._finalizer()

    def __enter__(self) -> OutputFileGuard:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"OutputFileGuard(file_name={str(self._file_name)!r}, "
            f"remove_file_on_dispose={self._remove}, disposed={self.disposed})"
        )
