"""Parse sidecar metadata files into structured records."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Tuple

from pydantic import ValidationError

from ..errors import MalformedSidecarError
from ..models import Category, MetadataSidecar
from .schema import SidecarDocument

_WHITESPACE = re.compile(r"\s+")


def split_datetime(value: str) -> Tuple[str, str]:
    """Split `"YYYY-MM-DD HH:MM:SS"` into its date and time parts.

    Raises ValueError when the value does not have exactly one date part and
    one time part, when the date does not have three `-` separated components,
    or when the time has fewer than two `:` separated components.
    """
    parts = _WHITESPACE.split(value.strip())
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"expected '<date> <time>', got {value!r}")
    date, time = parts
    if len(date.split("-")) != 3:
        raise ValueError(f"expected date as YYYY-MM-DD, got {date!r}")
    if len(time.split(":")) < 2:
        raise ValueError(f"expected time as HH:MM[:SS], got {time!r}")
    return date, time


class MetadataParser:
    """Reads a sidecar from disk and validates its shape."""

    def parse(self, path: str | Path) -> MetadataSidecar:
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            raise MalformedSidecarError(path, f"unreadable: {exc}") from exc
        return self.parse_bytes(raw, path=path)

    def parse_bytes(self, raw: bytes, *, path: str | Path = "<memory>") -> MetadataSidecar:
        try:
            document = SidecarDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise MalformedSidecarError(path, _describe(exc)) from exc

        try:
            date, time = split_datetime(document.date)
        except ValueError as exc:
            raise MalformedSidecarError(path, str(exc)) from exc

        return MetadataSidecar(
            path=Path(path).as_posix(),
            date=date,
            time=time,
            tags=list(document.tag),
            categories=[
                Category(name=item.name, slug=item.slug or "")
                for item in document.categories
            ],
        )


def _describe(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid sidecar"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "document"
    message = f"{location}: {first.get('msg', 'invalid value')}"
    if len(errors) > 1:
        message += f" (+{len(errors) - 1} more)"
    return message


__all__ = ["MetadataParser", "split_datetime"]
