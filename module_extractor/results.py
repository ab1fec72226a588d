from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, Optional


class FailureReason(str, Enum):
    READ = "Failed to read path"
    WRITE = "Failed to write contents to path"
    EXTRACT = "Failed to extract artifact to target path"


class InvalidBasePath(ValueError):
    """The target directory is not an application installation."""

    def __init__(self, message: str = "The base path is invalid.") -> None:
        super().__init__(message)


class StageError(RuntimeError):
    """A pipeline step failed for one artifact.

    The underlying exception (if any) is attached as ``__cause__``.
    """

    def __init__(
        self,
        reason: FailureReason,
        detail: str,
        *,
        step_id: str = "",
        module_name: Optional[str] = None,
    ) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail
        self.step_id = step_id
        self.module_name = module_name


@dataclass(frozen=True)
class ArtifactRef:
    key: Hashable
    locator: str


@dataclass(frozen=True)
class ArtifactResult:
    id: str
    path: str
    state: bool = False
    name: str = ""
    message: str = ""

    @classmethod
    def empty(cls, ref: ArtifactRef) -> "ArtifactResult":
        return cls(id=str(ref.key), path=ref.locator)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "state": self.state,
            "name": self.name,
            "message": self.message,
        }
