from __future__ import annotations

import logging
from dataclasses import replace

from ..lib.scratch import write_scratch_file
from ..pipeline import ArtifactContext
from ..results import FailureReason, StageError

logger = logging.getLogger(__name__)


class WriteScratchStep:
    step_id = "20_write_scratch"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        try:
            path = write_scratch_file(
                ctx.data or b"",
                prefix=ctx.config.file_prefix,
                temp_dir=ctx.config.temp_dir,
            )
        except OSError as e:
            raise StageError(
                FailureReason.WRITE,
                "Could not write artifact to a scratch file",
                step_id=self.step_id,
            ) from e

        logger.debug("Artifact %s written to %s", ctx.ref.locator, path)
        # The payload is on disk now; drop it from memory.
        return replace(ctx, data=None, scratch_file=path)
