from .step_10_load_artifact import LoadArtifactStep
from .step_20_write_scratch import WriteScratchStep
from .step_30_unpack_archive import UnpackArchiveStep
from .step_40_resolve_manifest import ResolveManifestStep
from .step_50_install_module import InstallModuleStep

__all__ = [
    "LoadArtifactStep",
    "WriteScratchStep",
    "UnpackArchiveStep",
    "ResolveManifestStep",
    "InstallModuleStep",
]
