"""
Ellipsoid Rasterization with Numba JIT Compilation

Fills every integer lattice point inside an axis-aligned ellipsoid. The
ellipsoid has radius r on X and Z and r * vertical_scale on Y, so one
primitive covers spheres (scale 1), squashed shells (scale < 1) and
elongated bodies (scale > 1).

Algorithm Overview:
1. Bounding Box: floor/ceil of center -/+ extent on each axis
2. Test: keep the point iff dx^2 + (dy / scale)^2 + dz^2 <= r^2
3. Count: sweep the box once and count the points that pass
4. Write: sweep again into an array sized to that count

Memory is O(included points) and time is O(box volume).

The result is a solid fill, not a shell. The kernel uses numpy float
semantics, so a zero vertical scale produces inf/NaN offsets that simply
fail the membership test.
"""

import math

import numpy as np
from numba import njit

from .voxel_map import VoxelMap


@njit(cache=True, error_model="numpy")
def _rasterize_ellipsoid(
    cx: float,
    cy: float,
    cz: float,
    radius: float,
    vertical_scale: float
) -> np.ndarray:
    """
    Collect lattice points inside the ellipsoid.

    Args:
        cx, cy, cz: Ellipsoid center
        radius: Horizontal radius
        vertical_scale: Y extent relative to the horizontal radius

    Returns:
        Array of shape (N, 3) with int64 xyz coordinates
    """
    r2 = radius * radius
    y_extent = radius * vertical_scale

    x_min = math.floor(cx - radius)
    x_max = math.ceil(cx + radius)
    y_min = math.floor(cy - y_extent)
    y_max = math.ceil(cy + y_extent)
    z_min = math.floor(cz - radius)
    z_max = math.ceil(cz + radius)

    nx = max(0, x_max - x_min + 1)
    ny = max(0, y_max - y_min + 1)
    nz = max(0, z_max - z_min + 1)
    if nx == 0 or ny == 0 or nz == 0:
        return np.empty((0, 3), dtype=np.int64)

    # Pass 1: count included points
    count = 0
    for x in range(x_min, x_max + 1):
        dx = x - cx
        for y in range(y_min, y_max + 1):
            dy = (y - cy) / vertical_scale
            for z in range(z_min, z_max + 1):
                dz = z - cz
                if dx * dx + dy * dy + dz * dz <= r2:
                    count += 1

    # Pass 2: write them
    points = np.empty((count, 3), dtype=np.int64)
    i = 0
    for x in range(x_min, x_max + 1):
        dx = x - cx
        for y in range(y_min, y_max + 1):
            dy = (y - cy) / vertical_scale
            for z in range(z_min, z_max + 1):
                dz = z - cz
                if dx * dx + dy * dy + dz * dz <= r2:
                    points[i, 0] = x
                    points[i, 1] = y
                    points[i, 2] = z
                    i += 1

    return points


def ellipsoid_points(
    cx: float,
    cy: float,
    cz: float,
    radius: float,
    vertical_scale: float = 1.0
) -> np.ndarray:
    """
    Compute the lattice points of a solid ellipsoid.

    Non-finite inputs yield no points. A negative radius or negative
    vertical scale gives an empty bounding box.

    Args:
        cx, cy, cz: Ellipsoid center (continuous coordinates)
        radius: Horizontal (X/Z) radius
        vertical_scale: Y extent relative to the horizontal radius

    Returns:
        Array of shape (N, 3) with int64 xyz coordinates
    """
    params = (cx, cy, cz, radius, vertical_scale)
    if not all(math.isfinite(p) for p in params):
        return np.empty((0, 3), dtype=np.int64)

    return _rasterize_ellipsoid(
        float(cx), float(cy), float(cz), float(radius), float(vertical_scale)
    )


def fill_ellipsoid(
    voxel_map: VoxelMap,
    cx: float,
    cy: float,
    cz: float,
    radius: float,
    color: int,
    vertical_scale: float = 1.0
):
    """
    Write a solid ellipsoid into a voxel map.

    Points already in the map are overwritten with the new color.

    Args:
        voxel_map: Target map
        cx, cy, cz: Ellipsoid center (continuous coordinates)
        radius: Horizontal (X/Z) radius
        color: Opaque color identifier
        vertical_scale: Y extent relative to the horizontal radius
    """
    points = ellipsoid_points(cx, cy, cz, radius, vertical_scale)
    voxel_map.set_many(points, color)
