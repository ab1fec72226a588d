from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .results import ArtifactResult

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"json", "yaml", "yml"}:
        return ext
    # Default to JSON for unknown extensions.
    return "json"


def build_report(results: Mapping[Any, ArtifactResult], *, log_path: Optional[str] = None) -> Dict[str, Any]:
    artifacts = [r.to_dict() for r in results.values()]
    installed = sum(1 for r in artifacts if r["state"])
    report: Dict[str, Any] = {
        "artifacts": artifacts,
        "installed": installed,
        "failed": len(artifacts) - installed,
    }
    if log_path:
        report["log_path"] = log_path
    return report


def save_report(path: str, results: Mapping[Any, ArtifactResult], *, log_path: Optional[str] = None) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    report = build_report(results, log_path=log_path)

    if _detect_format(p) in {"yaml", "yml"}:
        p.write_text(yaml.safe_dump(report, sort_keys=False), encoding="utf-8")
    else:
        p.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Report written to %s", p)


def load_report(path: str) -> Dict[str, Any]:
    p = Path(path)
    if _detect_format(p) in {"yaml", "yml"}:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    else:
        data = json.loads(p.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"Report file must be an object/dict, got {type(data)}")
    return data
