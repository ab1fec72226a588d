from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .lib.env import PATHS
from .lib.fetch import DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ExtractorConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def marker(self) -> str:
        return str(((self.raw.get("paths") or {}).get("marker")) or PATHS.marker)

    @property
    def code_dir(self) -> str:
        return str(((self.raw.get("paths") or {}).get("code_dir")) or PATHS.code_dir)

    @property
    def log_path(self) -> str:
        return str(((self.raw.get("paths") or {}).get("log")) or PATHS.log_default)

    @property
    def fetch_timeout(self) -> float:
        value = (self.raw.get("fetch") or {}).get("timeout_seconds")
        return float(value) if value is not None else DEFAULT_TIMEOUT_SECONDS

    @property
    def temp_dir(self) -> Optional[str]:
        value = (self.raw.get("scratch") or {}).get("temp_dir")
        return str(value) if value else None

    @property
    def file_prefix(self) -> str:
        return str(((self.raw.get("scratch") or {}).get("file_prefix")) or "artifact_")

    @property
    def dir_prefix(self) -> str:
        return str(((self.raw.get("scratch") or {}).get("dir_prefix")) or "module_")

    def with_overrides(self, *, fetch_timeout: Optional[float] = None) -> "ExtractorConfig":
        if fetch_timeout is None:
            return self
        if fetch_timeout <= 0:
            raise ValueError("fetch timeout must be positive")
        raw = dict(self.raw)
        raw["fetch"] = dict(raw.get("fetch") or {}, timeout_seconds=fetch_timeout)
        return ExtractorConfig(raw=raw)


def load_extractor_config(path: Optional[str]) -> ExtractorConfig:
    if path is None:
        return ExtractorConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("extractor config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("extractor config must contain a mapping/object")

    timeout = (raw.get("fetch") or {}).get("timeout_seconds")
    if timeout is not None and float(timeout) <= 0:
        raise ValueError("fetch.timeout_seconds must be positive")

    return ExtractorConfig(raw=raw)
