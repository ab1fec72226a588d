from __future__ import annotations

import logging
from dataclasses import replace

from ..lib.manifests import ManifestError, find_manifest, load_manifest, module_destination
from ..pipeline import ArtifactContext
from ..results import FailureReason, StageError

logger = logging.getLogger(__name__)


class ResolveManifestStep:
    step_id = "40_resolve_manifest"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        if ctx.inner_path is None:
            raise StageError(FailureReason.EXTRACT, "No unpacked module to resolve", step_id=self.step_id)

        manifest = None
        try:
            manifest = load_manifest(find_manifest(ctx.inner_path))
            destination = module_destination(ctx.root.path, manifest, code_dir=ctx.config.code_dir)
        except (ManifestError, OSError) as e:
            raise StageError(
                FailureReason.EXTRACT,
                str(e),
                step_id=self.step_id,
                module_name=manifest.name if manifest else None,
            ) from e

        logger.info("Module %s resolves to %s", manifest.name, destination)
        return replace(ctx, manifest=manifest, destination=destination)
