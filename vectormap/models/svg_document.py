"""Parsed map container model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    path_data: str | None = None


class SvgDocument(BaseModel):
    """The ``<svg>`` container: sizing attributes plus the path elements seen."""

    viewbox: tuple[float, float, float, float] | None = None
    width: float | None = None
    height: float | None = None
    elements: list[SvgElement] = Field(default_factory=list)

    @property
    def container_size(self) -> tuple[float, float] | None:
        """Canvas size implied by the container: viewBox, else width/height."""
        if self.viewbox is not None and self.viewbox[2] > 0 and self.viewbox[3] > 0:
            return (self.viewbox[2], self.viewbox[3])
        if self.width and self.height and self.width > 0 and self.height > 0:
            return (self.width, self.height)
        return None
