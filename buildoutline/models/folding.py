"""Renderer output models — rendered text plus collapsible region metadata."""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class FoldingType(str, Enum):
    """How a text viewer should treat a fold segment."""

    REGION = "region"


class FoldSegment(BaseModel):
    """A collapsible range inside a rendered text buffer.

    ``offset`` is absolute: it already includes the ``start_at_offset``
    the buffer was rendered with.
    """

    model_config = ConfigDict(frozen=True)

    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    is_collapsed: bool = False
    description: str = ""
    folding_type: FoldingType = FoldingType.REGION

    @property
    def end_offset(self) -> int:
        return self.offset + self.length


class RenderedOutput(NamedTuple):
    """Text and fold segments produced by one render pass.

    Unpacks as a pair: ``text, segments = processor.to_text()``.  Segments
    are typed loosely because a custom segment factory may return
    viewer-specific objects.
    """

    text: str
    segments: list[Any]
