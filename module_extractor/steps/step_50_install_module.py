from __future__ import annotations

import logging
import shutil
from dataclasses import replace

from ..lib.assets import copy_tree
from ..pipeline import ArtifactContext
from ..results import FailureReason, StageError

logger = logging.getLogger(__name__)


class InstallModuleStep:
    step_id = "50_install_module"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        if ctx.destination is None or ctx.inner_path is None or ctx.scratch_dir is None:
            raise StageError(
                FailureReason.EXTRACT,
                "Nothing resolved to install",
                step_id=self.step_id,
                module_name=ctx.module_name or None,
            )

        try:
            ctx.destination.mkdir(parents=True, exist_ok=True)
            copy_tree(ctx.inner_path, ctx.destination)
            shutil.rmtree(ctx.scratch_dir)
        except OSError as e:
            raise StageError(
                FailureReason.EXTRACT,
                f"Could not install {ctx.module_name} into {ctx.destination}",
                step_id=self.step_id,
                module_name=ctx.module_name,
            ) from e

        logger.info("Installed %s", ctx.module_name)
        return replace(ctx, scratch_dir=None, inner_path=None, installed=True)
