from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest

MODULE_XML = """<?xml version="1.0"?>
<config xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xsi:noNamespaceSchemaLocation="urn:magento:framework:Module/etc/module.xsd">
    <module name="{name}" setup_version="1.0.0"/>
</config>
"""


@pytest.fixture(autouse=True)
def isolated_logging():
    """Undo configure_logging() so each test starts from a clean root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ("_module_extractor_configured", "_module_extractor_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def magento_root(tmp_path) -> Path:
    """An installation root with the app/etc/env.php marker."""
    root = tmp_path / "magento"
    (root / "app" / "etc").mkdir(parents=True)
    (root / "app" / "etc" / "env.php").write_text("<?php\nreturn [];\n", encoding="utf-8")
    return root


@pytest.fixture
def scratch_tmp(tmp_path) -> Path:
    p = tmp_path / "scratch"
    p.mkdir()
    return p


@pytest.fixture
def make_artifact(tmp_path):
    """Build a module ZIP.

    Members live under ``container/``. ``manifest_name=None`` leaves out
    etc/module.xml; ``raw_manifest`` writes it verbatim.
    """
    out_dir = tmp_path / "artifacts"
    out_dir.mkdir()
    counter = {"n": 0}

    def _make(
        manifest_name: Optional[str] = "Vendor_Sample",
        *,
        container: str = "Sample",
        files: Optional[Dict[str, bytes]] = None,
        raw_manifest: Optional[str] = None,
        extra_members: Optional[Dict[str, bytes]] = None,
    ) -> Path:
        counter["n"] += 1
        path = out_dir / f"artifact{counter['n']}.zip"
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            if raw_manifest is not None:
                zf.writestr(f"{container}/etc/module.xml", raw_manifest)
            elif manifest_name is not None:
                zf.writestr(f"{container}/etc/module.xml", MODULE_XML.format(name=manifest_name))
            for rel, data in (files or {}).items():
                zf.writestr(f"{container}/{rel}", data)
            for name, data in (extra_members or {}).items():
                zf.writestr(name, data)
        return path

    return _make
