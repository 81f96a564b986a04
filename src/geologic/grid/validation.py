"""Validation helpers shared by grid operations."""

from __future__ import annotations

from typing import Any

from geologic.geometry import Bounds2D

from .errors import RegionBoundsError


def ensure_positive_area(region: Bounds2D[Any]) -> Bounds2D[Any]:
    """Reject regions with fractional coordinates or without area."""

    for value in region.to_tuple():
        if isinstance(value, bool) or not isinstance(value, int):
            raise RegionBoundsError(
                f"Region {region.to_tuple()} must use whole cell coordinates",
                bounds=region,
            )
    if region.width <= 0 or region.height <= 0:
        raise RegionBoundsError(
            f"Bounding area must be greater than 0, got {region.width}x{region.height}",
            bounds=region,
        )
    return region


def ensure_region(region: Bounds2D[Any], width: int, height: int) -> Bounds2D[Any]:
    """Reject regions without area or reaching outside ``width`` x ``height``."""

    ensure_positive_area(region)
    if region.left < 0 or region.top < 0:
        raise RegionBoundsError(
            f"Region {region.to_tuple()} starts at a negative coordinate",
            bounds=region,
            grid_size=(width, height),
        )
    if region.right > width:
        raise RegionBoundsError(
            f"Region {region.to_tuple()} ends at column {region.right}, "
            f"grid is {width} wide",
            bounds=region,
            grid_size=(width, height),
        )
    if region.bottom > height:
        raise RegionBoundsError(
            f"Region {region.to_tuple()} ends at row {region.bottom}, "
            f"grid is {height} high",
            bounds=region,
            grid_size=(width, height),
        )
    return region


__all__ = ["ensure_positive_area", "ensure_region"]
