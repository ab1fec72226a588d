from __future__ import annotations

import logging
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)


class ArchiveLayoutError(ValueError):
    pass


def extract_zip(source: Path, dest: Path) -> list[str]:
    """Extract every member of ``source`` into ``dest``.

    zipfile sanitizes member names, so entries cannot escape ``dest``.
    Raises zipfile.BadZipFile, OSError or RuntimeError (encrypted members).
    """

    with zipfile.ZipFile(source) as zf:
        names = zf.namelist()
        zf.extractall(dest)
    logger.info("Extracted %d entries from %s into %s", len(names), source, dest)
    return names


def container_dir(extract_root: Path) -> Path:
    """Return the single top-level directory an artifact unpacks into.

    Artifacts must contain exactly one top-level entry and it must be a
    directory; anything else raises ArchiveLayoutError.
    """

    entries = sorted(extract_root.iterdir(), key=lambda c: c.name)
    if len(entries) != 1:
        names = [e.name for e in entries]
        raise ArchiveLayoutError(
            f"Expected exactly one top-level directory in artifact, found {len(entries)}: {names}"
        )

    inner = entries[0]
    if not inner.is_dir():
        raise ArchiveLayoutError(f"Top-level entry is not a directory: {inner.name}")
    return inner
