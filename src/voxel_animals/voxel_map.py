"""
Sparse Voxel Map

This module provides:
- Voxel: The output record (integer lattice coordinates + opaque color)
- VoxelMap: Deduplicating store keyed by quantized integer coordinates

Models are assembled by writing into a VoxelMap from continuous-space
coordinates. Every coordinate is rounded to the nearest lattice point before
it becomes a key, so two writes that land on the same lattice point always
collide and the later one wins.

Unlike a dense grid, the map has no fixed bounds: animals can extend below
the floor or far along any axis without resizing anything.
"""

import math
from typing import Dict, List, NamedTuple, Optional, Tuple

import numpy as np


Key = Tuple[int, int, int]


class Voxel(NamedTuple):
    """A single colored voxel at integer lattice coordinates."""
    x: int
    y: int
    z: int
    color: int


def round_coord(value: float) -> int:
    """
    Round a continuous coordinate to the nearest lattice index.

    Ties round toward +infinity, so 0.5 -> 1 and -0.5 -> 0. This is the
    only rounding rule used anywhere in the package.

    Args:
        value: Finite coordinate value

    Returns:
        Nearest integer
    """
    floor = math.floor(value)
    if value - floor >= 0.5:
        return floor + 1
    return floor


def _is_finite(x: float, y: float, z: float) -> bool:
    return math.isfinite(x) and math.isfinite(y) and math.isfinite(z)


class VoxelMap:
    """
    Deduplicating voxel store with overwrite-wins semantics.

    One map belongs to one model build: it starts empty, is mutated through
    set() and fill(), and is flattened with values() once the model is done.

    Usage:
        voxel_map = VoxelMap()
        voxel_map.fill(0, 4, 0, 3.5, Colors.DARK, vertical_scale=1.2)
        voxel_map.set(0, 8.5, 3, Colors.BLACK)
        voxels = voxel_map.values()
    """

    __slots__ = ("_voxels",)

    def __init__(self):
        self._voxels: Dict[Key, Voxel] = {}

    def set(self, x: float, y: float, z: float, color: int):
        """
        Store a voxel at the lattice point nearest to (x, y, z).

        Any voxel already at that lattice point is replaced. Non-finite
        coordinates are excluded: nothing is written and nothing is raised.

        Args:
            x, y, z: Continuous coordinates
            color: Opaque color identifier
        """
        if not _is_finite(x, y, z):
            return

        rx = round_coord(x)
        ry = round_coord(y)
        rz = round_coord(z)
        self._voxels[(rx, ry, rz)] = Voxel(rx, ry, rz, color)

    def set_many(self, points: np.ndarray, color: int):
        """
        Write a batch of integer lattice points with a single color.

        Args:
            points: Array of shape (N, 3) with integer xyz coordinates
            color: Opaque color identifier
        """
        voxels = self._voxels
        for x, y, z in points.tolist():
            voxels[(x, y, z)] = Voxel(x, y, z, color)

    def fill(
        self,
        cx: float,
        cy: float,
        cz: float,
        radius: float,
        color: int,
        vertical_scale: float = 1.0
    ):
        """Fill a solid ellipsoid. See ellipsoid.fill_ellipsoid."""
        from .ellipsoid import fill_ellipsoid

        fill_ellipsoid(self, cx, cy, cz, radius, color, vertical_scale)

    def values(self) -> List[Voxel]:
        """
        Flatten the map into its voxels.

        Returns:
            One Voxel per distinct coordinate, in unspecified order
        """
        return list(self._voxels.values())

    def get(self, x: int, y: int, z: int) -> Optional[Voxel]:
        """Get the voxel at integer coordinates, or None if empty."""
        return self._voxels.get((x, y, z))

    def __contains__(self, key: Key) -> bool:
        return tuple(key) in self._voxels

    def __len__(self) -> int:
        return len(self._voxels)
