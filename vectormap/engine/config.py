"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls optional stages."""

    # Hit-test polygons (T2.03)
    build_polygons: bool = True
    # Points sampled along each cubic segment when building polygons
    samples_per_segment: int = 12
