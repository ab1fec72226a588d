from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def write_scratch_file(
    data: bytes,
    *,
    prefix: str = "artifact_",
    temp_dir: Optional[str] = None,
) -> Path:
    """Persist ``data`` to a new uniquely named temp file and return its path.

    An empty payload is treated as a failed write. The partial file is
    removed before the error propagates.
    """

    fd, name = tempfile.mkstemp(prefix=prefix, suffix=".zip", dir=temp_dir)
    p = Path(name)
    try:
        with os.fdopen(fd, "wb") as f:
            written = f.write(data)
        if not written:
            raise OSError(f"No bytes written to {p}")
    except BaseException:
        discard_file(p)
        raise
    return p


def make_scratch_dir(parent: Path, *, prefix: str = "module_") -> Path:
    return Path(tempfile.mkdtemp(prefix=prefix, dir=str(parent)))


def discard_file(path: Optional[Path]) -> None:
    """Best-effort removal; failures are logged, never raised."""
    if path is None:
        return
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.debug("Could not remove scratch file %s: %s", path, e)


def discard_dir(path: Optional[Path]) -> None:
    if path is None or not path.exists():
        return
    shutil.rmtree(path, ignore_errors=True)
    if path.exists():
        logger.debug("Could not fully remove scratch dir %s", path)
