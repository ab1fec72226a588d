from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    marker: str = "app/etc/env.php"
    code_dir: str = "app/code"
    manifest: str = "etc/module.xml"
    log_default: str = "var/log/module-extractor.log"


PATHS = Paths()
