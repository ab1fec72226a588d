from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def is_remote(locator: str) -> bool:
    return urlparse(locator).scheme.lower() in {"http", "https"}


def _local_path(locator: str) -> Path:
    parsed = urlparse(locator)
    if parsed.scheme.lower() == "file":
        if parsed.netloc not in {"", "localhost"}:
            raise ValueError(f"Unsupported file URL host: {parsed.netloc}")
        return Path(unquote(parsed.path))
    return Path(locator).expanduser()


def load_artifact(locator: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> bytes:
    """Read the raw bytes behind a path, file:// URL or http(s) URL.

    Raises OSError, ValueError or requests.RequestException when the
    resource cannot be read.
    """

    if is_remote(locator):
        logger.info("GET %s (timeout=%ss)", locator, timeout)
        r = requests.get(locator, timeout=timeout)
        r.raise_for_status()
        return r.content

    p = _local_path(locator)
    logger.info("READ %s", p)
    return p.read_bytes()
