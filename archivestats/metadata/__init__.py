"""Sidecar metadata resolution and parsing."""

from .parser import MetadataParser, split_datetime
from .resolver import MetadataResolver
from .schema import SidecarCategory, SidecarDocument

__all__ = [
    "MetadataParser",
    "MetadataResolver",
    "SidecarCategory",
    "SidecarDocument",
    "split_datetime",
]
