from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Protocol, Sequence

from .extractor_config import ExtractorConfig
from .lib.manifests import ModuleManifest
from .lib.root import InstallationRoot
from .lib.scratch import discard_dir, discard_file
from .results import ArtifactRef, ArtifactResult, FailureReason, StageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtifactContext:
    """Everything known about one artifact so far.

    Steps never mutate a context; they return a new one.
    """

    ref: ArtifactRef
    root: InstallationRoot
    config: ExtractorConfig
    data: Optional[bytes] = None
    scratch_file: Optional[Path] = None
    scratch_dir: Optional[Path] = None
    inner_path: Optional[Path] = None
    manifest: Optional[ModuleManifest] = None
    destination: Optional[Path] = None
    installed: bool = False

    @property
    def module_name(self) -> str:
        return self.manifest.name if self.manifest else ""


class Step(Protocol):
    """A single stage of the per-artifact pipeline."""

    step_id: str

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        ...


def run_artifact(
    *,
    ref: ArtifactRef,
    root: InstallationRoot,
    config: ExtractorConfig,
    steps: Sequence[Step],
) -> ArtifactResult:
    """Run every step for one artifact and return its result.

    The first failing step decides the message. Scratch state is removed on
    every exit path.
    """

    result = ArtifactResult.empty(ref)
    ctx = ArtifactContext(ref=ref, root=root, config=config)

    try:
        for step in steps:
            logger.info("[%s] Running step %s", ref.key, step.step_id)
            ctx = step.run(ctx)
    except StageError as e:
        logger.warning(
            "[%s] Step %s failed for %s: %s (cause: %r)",
            ref.key,
            e.step_id,
            ref.locator,
            e.detail,
            e.__cause__,
        )
        return replace(
            result,
            name=e.module_name or ctx.module_name,
            message=e.reason.value,
        )
    except Exception:
        # Anything a step did not classify still must not abort the batch.
        logger.exception("[%s] Unexpected error while processing %s", ref.key, ref.locator)
        return replace(result, name=ctx.module_name, message=FailureReason.EXTRACT.value)
    finally:
        discard_file(ctx.scratch_file)
        discard_dir(ctx.scratch_dir)

    logger.info("[%s] Installed %s into %s", ref.key, ctx.module_name, ctx.destination)
    return replace(result, state=ctx.installed, name=ctx.module_name)
