from __future__ import annotations

from dataclasses import replace

from module_extractor.extractor_config import ExtractorConfig
from module_extractor.lib.manifests import ModuleManifest
from module_extractor.lib.root import InstallationRoot
from module_extractor.pipeline import ArtifactContext, run_artifact
from module_extractor.results import ArtifactRef, FailureReason, StageError


class _MakeScratch:
    step_id = "01_make_scratch"

    def __init__(self, tmp_path):
        self.tmp_path = tmp_path

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        f = self.tmp_path / "artifact_x.zip"
        f.write_bytes(b"x")
        d = self.tmp_path / "module_x"
        (d / "Inner").mkdir(parents=True)
        return replace(ctx, scratch_file=f, scratch_dir=d)


class _Named:
    step_id = "02_named"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        return replace(ctx, manifest=ModuleManifest(name="Vendor_Sample"))


class _Fail:
    step_id = "03_fail"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        try:
            raise PermissionError("denied")
        except PermissionError as e:
            raise StageError(FailureReason.EXTRACT, "copy failed", step_id=self.step_id) from e


class _Done:
    step_id = "03_done"

    def run(self, ctx: ArtifactContext) -> ArtifactContext:
        return replace(ctx, installed=True)


def _run(magento_root, steps):
    return run_artifact(
        ref=ArtifactRef(key=7, locator="/some/artifact.zip"),
        root=InstallationRoot.from_path(magento_root),
        config=ExtractorConfig(),
        steps=steps,
    )


def test_failure_keeps_parsed_name_and_cleans_up(magento_root, tmp_path):
    result = _run(magento_root, [_MakeScratch(tmp_path), _Named(), _Fail()])
    assert result.id == "7"
    assert result.path == "/some/artifact.zip"
    assert result.state is False
    assert result.name == "Vendor_Sample"
    assert result.message == FailureReason.EXTRACT.value
    assert not (tmp_path / "artifact_x.zip").exists()
    assert not (tmp_path / "module_x").exists()


def test_success_only_when_installed(magento_root, tmp_path):
    result = _run(magento_root, [_MakeScratch(tmp_path), _Named(), _Done()])
    assert result.state is True
    assert result.message == ""
    assert not (tmp_path / "artifact_x.zip").exists()

    # Every step ran but nothing marked the module installed.
    assert _run(magento_root, [_Named()]).state is False


def test_first_failure_wins(magento_root):
    class _ReadFail:
        step_id = "01_read"

        def run(self, ctx):
            raise StageError(FailureReason.READ, "nope", step_id=self.step_id)

    result = _run(magento_root, [_ReadFail(), _Fail()])
    assert result.message == "Failed to read path"
    assert result.name == ""


def test_unexpected_error_becomes_extract_failure(magento_root, tmp_path):
    class _Broken:
        step_id = "03_broken"

        def run(self, ctx):
            raise KeyError("surprise")

    result = _run(magento_root, [_MakeScratch(tmp_path), _Named(), _Broken()])
    assert result.state is False
    assert result.name == "Vendor_Sample"
    assert result.message == FailureReason.EXTRACT.value
    assert not (tmp_path / "artifact_x.zip").exists()
    assert not (tmp_path / "module_x").exists()
