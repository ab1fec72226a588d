from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_tree(src: str | Path, dst: str | Path) -> int:
    """Copy the contents of ``src`` into ``dst``, overwriting existing files.

    Files already in ``dst`` that are not in ``src`` are left alone.
    Returns the number of files copied.
    """

    s = Path(src)
    d = Path(dst)
    if not s.is_dir():
        raise FileNotFoundError(str(s))

    d.mkdir(parents=True, exist_ok=True)
    copied = 0
    for item in sorted(s.rglob("*")):
        rel = item.relative_to(s)
        out = d / rel
        if item.is_dir():
            out.mkdir(parents=True, exist_ok=True)
        else:
            out.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(item, out)
            copied += 1

    logger.info("Copied %d files %s -> %s", copied, s, d)
    return copied
