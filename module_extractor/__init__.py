"""Magento module extractor.

Installs modules packaged as ZIP artifacts into an application tree:
- Artifacts may be local paths or URLs
- The destination is derived from the module's etc/module.xml
- Each artifact is processed independently and reported on
- Scratch files and directories are always cleaned up
"""

from .extractor import ModuleExtractor
from .results import ArtifactRef, ArtifactResult, FailureReason, InvalidBasePath

__all__ = [
    "ArtifactRef",
    "ArtifactResult",
    "FailureReason",
    "InvalidBasePath",
    "ModuleExtractor",
]
