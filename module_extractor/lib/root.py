from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..results import InvalidBasePath
from .env import PATHS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallationRoot:
    path: Path

    @classmethod
    def from_path(cls, root: str | Path, *, marker: str = PATHS.marker) -> "InstallationRoot":
        """Validate that ``root`` holds an application installation.

        The marker file (app/etc/env.php by default) must exist beneath it.
        """
        raw = str(root).rstrip(os.sep) or os.sep
        p = Path(raw).expanduser()
        try:
            p = p.resolve()
        except OSError:
            p = p.absolute()

        if not (p / marker).exists():
            logger.debug("Marker %s not found under %s", marker, p)
            raise InvalidBasePath()

        return cls(path=p)

    def join(self, rel: str | Path) -> Path:
        return self.path / rel
