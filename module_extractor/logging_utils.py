from __future__ import annotations

import logging
from pathlib import Path

FALLBACK_LOG_NAME = "module-extractor.log"

_CONFIGURED_FLAG = "_module_extractor_configured"
_LOG_PATH_ATTR = "_module_extractor_log_path"


def _open_log(log_path: str) -> tuple[logging.FileHandler, str]:
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8"), log_path
    except OSError:
        # The installation's var/log may be read-only; keep a log in the cwd.
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        return logging.FileHandler(fallback, encoding="utf-8"), fallback


def configure_logging(log_path: str, *, verbose: bool = False) -> str:
    """Send every module's log records to ``log_path``.

    stdout is reserved for the per-artifact lines, so the console handler
    (``verbose``) writes to stderr. ``verbose`` also lowers the level to
    DEBUG, which includes scratch cleanup problems.

    Idempotent: later calls keep the first file. Returns the file actually
    used, which may be the fallback in the working directory.
    """

    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG, False):
        return getattr(root, _LOG_PATH_ATTR, log_path)

    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler, chosen_path = _open_log(log_path)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    if verbose:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        root.addHandler(console)

    setattr(root, _CONFIGURED_FLAG, True)
    setattr(root, _LOG_PATH_ATTR, chosen_path)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
