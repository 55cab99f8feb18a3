"""Locate the sidecar metadata file that belongs to a content file."""

from __future__ import annotations

from pathlib import Path

from ..errors import MissingSidecarError
from ..models import SidecarLookup


class MetadataResolver:
    """Derives `<dir>/<stem><sidecar_extension>` for a content path."""

    def __init__(self, sidecar_extension: str = ".json") -> None:
        self.sidecar_extension = sidecar_extension

    def sidecar_path(self, content_path: str | Path) -> str:
        path = Path(content_path)
        return path.with_name(f"{path.stem}{self.sidecar_extension}").as_posix()

    def resolve(self, content_path: str | Path) -> SidecarLookup:
        """Return the sidecar path and whether it exists; never raises."""
        sidecar = self.sidecar_path(content_path)
        try:
            exists = Path(sidecar).is_file()
        except OSError:
            exists = False
        return SidecarLookup(
            content_path=Path(content_path).as_posix(),
            sidecar_path=sidecar,
            exists=exists,
        )

    def require(self, content_path: str | Path) -> str:
        """Return the sidecar path, raising when it does not exist."""
        lookup = self.resolve(content_path)
        if not lookup.exists:
            raise MissingSidecarError(lookup.content_path, lookup.sidecar_path)
        return lookup.sidecar_path


__all__ = ["MetadataResolver"]
