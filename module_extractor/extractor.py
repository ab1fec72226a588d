from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Union

from .extractor_config import ExtractorConfig
from .lib.root import InstallationRoot
from .pipeline import Step, run_artifact
from .results import ArtifactRef, ArtifactResult
from .steps import (
    InstallModuleStep,
    LoadArtifactStep,
    ResolveManifestStep,
    UnpackArchiveStep,
    WriteScratchStep,
)

logger = logging.getLogger(__name__)

Artifacts = Union[Mapping[Hashable, str], Sequence[str]]


def build_steps() -> List[Step]:
    return [
        LoadArtifactStep(),
        WriteScratchStep(),
        UnpackArchiveStep(),
        ResolveManifestStep(),
        InstallModuleStep(),
    ]


def _refs(artifacts: Artifacts) -> Iterable[ArtifactRef]:
    if isinstance(artifacts, Mapping):
        for key, locator in artifacts.items():
            yield ArtifactRef(key=key, locator=str(locator))
    else:
        for index, locator in enumerate(artifacts):
            yield ArtifactRef(key=index, locator=str(locator))


class ModuleExtractor:
    """Installs module artifacts into one application tree.

    The base path is validated on construction; an invalid one raises
    InvalidBasePath before any artifact is touched.
    """

    def __init__(self, base_path: Union[str, Path] = "", config: Optional[ExtractorConfig] = None) -> None:
        self.config = config or ExtractorConfig()
        self.root = InstallationRoot.from_path(base_path or Path.cwd(), marker=self.config.marker)
        self.steps = build_steps()

    def extract(self, artifacts: Artifacts = ()) -> Dict[Hashable, ArtifactResult]:
        """Install every artifact, in order, and report on each.

        Returns a dict keyed like the input (list indexes for sequences).
        A failing artifact never stops the batch.
        """

        results: Dict[Hashable, ArtifactResult] = {}
        for ref in _refs(artifacts):
            results[ref.key] = run_artifact(
                ref=ref,
                root=self.root,
                config=self.config,
                steps=self.steps,
            )

        failed = sum(1 for r in results.values() if not r.state)
        logger.info("Processed %d artifacts (%d failed)", len(results), failed)
        return results
