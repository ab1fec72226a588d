from __future__ import annotations

import logging
from dataclasses import replace

import requests

from ..lib.fetch import load_artifact
from ..pipeline import ArtifactContext
from ..results import FailureReason, StageError

logger = logging.getLogger(__name__)


class LoadArtifactStep:
    step_id = "10_load_artifact"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        locator = ctx.ref.locator
        try:
            data = load_artifact(locator, timeout=ctx.config.fetch_timeout)
        except (OSError, ValueError, requests.RequestException) as e:
            raise StageError(
                FailureReason.READ,
                f"Could not read {locator}",
                step_id=self.step_id,
            ) from e

        logger.info("Loaded %d bytes from %s", len(data), locator)
        return replace(ctx, data=data)
