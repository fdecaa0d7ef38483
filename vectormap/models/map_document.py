"""JSON-ready export of a parsed map."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from vectormap.models.geometry import BoundingBox
from vectormap.svg.serializer import outline_to_d

if TYPE_CHECKING:
    from vectormap.models.region import MapDocument


class BoxModel(BaseModel):
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_box(cls, box: BoundingBox | None) -> BoxModel | None:
        if box is None:
            return None
        return cls(x=box.x, y=box.y, width=box.width, height=box.height)


class DiagnosticModel(BaseModel):
    kind: str
    message: str
    region_id: str | None = None
    detail: str = ""


class RegionModel(BaseModel):
    id: str
    name: str
    # Display-space path data
    d: str = ""
    bounds: BoxModel | None = None


class MapDocumentModel(BaseModel):
    regions: list[RegionModel] = Field(default_factory=list)
    bounds: BoxModel | None = None
    scale: float = 1.0
    translate: tuple[float, float] = (0.0, 0.0)
    canvas: tuple[float, float] | None = None
    degraded: bool = False
    diagnostics: list[DiagnosticModel] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, document: MapDocument, precision: int = 3) -> MapDocumentModel:
        t = document.transform
        return cls(
            regions=[
                RegionModel(
                    id=r.id,
                    name=r.name,
                    d=outline_to_d(r.outline, precision),
                    bounds=BoxModel.from_box(r.display_bounds),
                )
                for r in document.regions
            ],
            bounds=BoxModel.from_box(document.bounds),
            scale=t.scale,
            translate=(t.translate_x, t.translate_y),
            canvas=(document.canvas.width, document.canvas.height) if document.canvas else None,
            degraded=document.degraded,
            diagnostics=[
                DiagnosticModel(kind=d.kind.value, message=d.message, region_id=d.region_id, detail=d.detail)
                for d in document.diagnostics
            ],
            errors=dict(document.errors),
        )
