from __future__ import annotations

import logging
import lzma
import zipfile
import zlib
from dataclasses import replace

from ..lib.archive import ArchiveLayoutError, container_dir, extract_zip
from ..lib.scratch import discard_dir, make_scratch_dir
from ..pipeline import ArtifactContext
from ..results import FailureReason, StageError

logger = logging.getLogger(__name__)


class UnpackArchiveStep:
    step_id = "30_unpack_archive"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        if ctx.scratch_file is None:
            raise StageError(FailureReason.EXTRACT, "No scratch file to unpack", step_id=self.step_id)

        try:
            work_dir = make_scratch_dir(ctx.root.path, prefix=ctx.config.dir_prefix)
        except OSError as e:
            raise StageError(
                FailureReason.EXTRACT,
                f"Could not create a scratch directory under {ctx.root.path}",
                step_id=self.step_id,
            ) from e

        # The orchestrator only learns about work_dir if this step succeeds.
        try:
            extract_zip(ctx.scratch_file, work_dir)
            inner = container_dir(work_dir)
        except (
            zipfile.BadZipFile,
            zlib.error,
            lzma.LZMAError,
            EOFError,
            ArchiveLayoutError,
            OSError,
            RuntimeError,
            ValueError,
        ) as e:
            discard_dir(work_dir)
            raise StageError(
                FailureReason.EXTRACT,
                f"Could not unpack {ctx.ref.locator}: {e}",
                step_id=self.step_id,
            ) from e

        return replace(ctx, scratch_dir=work_dir, inner_path=inner)
