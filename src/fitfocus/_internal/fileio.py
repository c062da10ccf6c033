"""File writing helpers."""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def write_text(path: Path, text: str) -> None:
    """Create or truncate *path* and write *text* to it."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)


def atomic_write_text(path: Path, text: str) -> None:
    """Replace the contents of *path* with *text* in one rename.

    The text goes to a temporary file in the same directory first, which is
    then renamed over *path*.  A reader polling *path* sees either the old
    or the new contents, never a partial write.  The file keeps the mode of
    the file it replaces, or gets the umask default when it is new.
    """
    mode = _replacement_mode(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
    logger.debug("Wrote %d bytes to %s", len(text), path)


def _replacement_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        # os.umask can only be read by setting it
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
