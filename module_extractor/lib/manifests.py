"""module.xml parsing.

A Magento module declares its identity in etc/module.xml:

    <config>
        <module name="Vendor_Sample" setup_version="1.0.0"/>
    </config>

Only the ``name`` attribute is read. It must have the form
``Namespace_Name`` and maps to app/code/<Namespace>/<Name>.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .env import PATHS

logger = logging.getLogger(__name__)

NAME_SEPARATOR = "_"


class ManifestError(ValueError):
    pass


@dataclass(frozen=True)
class ModuleManifest:
    name: str

    def segments(self) -> Tuple[str, str]:
        return split_module_name(self.name)

    @property
    def vendor(self) -> str:
        return self.segments()[0]

    @property
    def module(self) -> str:
        return self.segments()[1]


def split_module_name(name: str) -> Tuple[str, str]:
    parts = name.split(NAME_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise ManifestError(f"Module name must look like Namespace_Name, got {name!r}")
    return parts[0], parts[1]


def find_manifest(container: Path, *, rel_path: str = PATHS.manifest) -> Path:
    p = container / rel_path
    if not p.is_file():
        raise ManifestError(f"Manifest not found: {p}")
    return p


def load_manifest(path: Path) -> ModuleManifest:
    """Parse module.xml and return the declared module name.

    Raises ManifestError on malformed XML, a missing <module> element or an
    empty name attribute.
    """

    try:
        tree = ET.parse(path)
    except (ET.ParseError, ValueError) as e:
        # expat raises a bare ValueError for declared multi-byte encodings.
        raise ManifestError(f"Malformed manifest {path}: {e}") from e

    # iter() includes the root element itself.
    module = next(tree.getroot().iter("module"), None)
    if module is None:
        raise ManifestError(f"No <module> element in {path}")

    name = (module.get("name") or "").strip()
    if not name:
        raise ManifestError(f"<module> element has no name attribute in {path}")

    logger.info("Manifest %s declares module %s", path, name)
    return ModuleManifest(name=name)


def module_destination(root: Path, manifest: ModuleManifest, *, code_dir: str = PATHS.code_dir) -> Path:
    vendor, module = manifest.segments()
    return root / code_dir / vendor / module
