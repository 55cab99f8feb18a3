"""Error taxonomy shared by the report pipeline."""

from __future__ import annotations

from pathlib import Path


class FatalIOError(RuntimeError):
    """Raised when the run must abort without producing a report."""


class ArchiveScanError(FatalIOError):
    """Raised when the archive tree cannot be traversed."""


class ArchiveNotFoundError(ArchiveScanError):
    """Raised when the archive root does not exist."""


class ReportWriteError(FatalIOError):
    """Raised when the report cannot be persisted."""


class ReportCancelled(RuntimeError):
    """Raised when a run is cancelled before the report is assembled."""


class MissingSidecarError(FileNotFoundError):
    """Raised when a content file has no metadata sidecar."""

    def __init__(self, content_path: str, sidecar_path: str) -> None:
        super().__init__(f"Missing metadata sidecar for {content_path} (expected {sidecar_path})")
        self.content_path = content_path
        self.sidecar_path = sidecar_path


class MalformedSidecarError(ValueError):
    """Raised when a sidecar cannot be parsed into usable metadata."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


class DecompositionError(MalformedSidecarError):
    """Raised when a sidecar date or time does not have the expected shape."""


__all__ = [
    "ArchiveNotFoundError",
    "ArchiveScanError",
    "DecompositionError",
    "FatalIOError",
    "MalformedSidecarError",
    "MissingSidecarError",
    "ReportCancelled",
    "ReportWriteError",
]
