"""Wire schema for sidecar metadata files."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class SidecarCategory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    slug: Optional[StrictStr] = None


class SidecarDocument(BaseModel):
    """Fields consumed from a `{date, tag, categories}` sidecar object."""

    model_config = ConfigDict(extra="ignore")

    date: StrictStr
    tag: List[StrictStr] = Field(default_factory=list)
    categories: List[SidecarCategory] = Field(default_factory=list)

    @field_validator("tag", "categories", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = ["SidecarCategory", "SidecarDocument"]
