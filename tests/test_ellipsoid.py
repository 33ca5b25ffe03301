"""
Unit tests for ellipsoid rasterization.
"""

import math
import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_animals.ellipsoid import ellipsoid_points, fill_ellipsoid
from voxel_animals.voxel_map import VoxelMap


def brute_force(cx, cy, cz, r, sy, margin=3):
    """Reference membership over a generous box."""
    extent = int(math.ceil(abs(r) * max(1.0, abs(sy)))) + margin
    points = set()
    for x in range(int(math.floor(cx)) - extent, int(math.ceil(cx)) + extent + 1):
        for y in range(int(math.floor(cy)) - extent, int(math.ceil(cy)) + extent + 1):
            for z in range(int(math.floor(cz)) - extent, int(math.ceil(cz)) + extent + 1):
                dx = x - cx
                dy = (y - cy) / sy
                dz = z - cz
                if dx * dx + dy * dy + dz * dz <= r * r:
                    points.add((x, y, z))
    return points


def as_set(points):
    return {tuple(int(c) for c in p) for p in points}


class TestEllipsoidPoints(unittest.TestCase):
    """Tests for the lattice point kernel."""

    def test_sphere_membership(self):
        """Test the radius 2 sphere around the origin."""
        points = as_set(ellipsoid_points(0, 0, 0, 2))

        assert (0, 0, 0) in points
        assert (2, 0, 0) in points
        assert (0, -2, 0) in points
        assert (3, 0, 0) not in points
        assert all(x * x + y * y + z * z <= 4 for x, y, z in points)
        assert len(points) == 33

    def test_anisotropy(self):
        """Test vertical stretching."""
        points = as_set(ellipsoid_points(0, 0, 0, 2, vertical_scale=2))

        assert (0, 3, 0) in points
        assert (0, 4, 0) in points
        assert (0, 5, 0) not in points
        assert (0, -5, 0) not in points

        horizontal = {p for p in points if p[1] == 0}
        sphere_slice = {p for p in as_set(ellipsoid_points(0, 0, 0, 2)) if p[1] == 0}
        assert horizontal == sphere_slice

    def test_flattened(self):
        """Test vertical squashing."""
        points = as_set(ellipsoid_points(0, 0, 0, 4, vertical_scale=0.5))

        assert (4, 0, 0) in points
        assert (0, 2, 0) in points
        assert (0, 3, 0) not in points

    def test_matches_brute_force(self):
        """Test exact agreement with a direct membership scan."""
        cases = [
            (0.3, -1.7, 2.2, 3.1, 1.0),
            (1.5, 0.5, -0.5, 2.5, 1.4),
            (-4.0, 2.0, 1.0, 5.0, 0.6),
            (0.0, 0.0, 0.0, 1.0, 0.8),
        ]
        for cx, cy, cz, r, sy in cases:
            points = ellipsoid_points(cx, cy, cz, r, sy)
            found = as_set(points)
            assert len(found) == len(points)  # each point exactly once
            assert found == brute_force(cx, cy, cz, r, sy)

    def test_zero_radius_fractional_center(self):
        """Test that a degenerate radius at a fractional center is empty."""
        points = ellipsoid_points(1.2, 1.2, 1.2, 0)
        assert len(points) <= 1
        assert len(points) == 0

    def test_zero_radius_integral_center(self):
        """Test that a degenerate radius at a lattice point keeps that point."""
        points = as_set(ellipsoid_points(1, 2, 3, 0))
        assert points == {(1, 2, 3)}

    def test_negative_radius(self):
        """Test that a negative radius gives an empty box."""
        assert len(ellipsoid_points(0, 0, 0, -2)) == 0

    def test_negative_vertical_scale(self):
        """Test that a negative vertical scale terminates with no points."""
        assert len(ellipsoid_points(0, 0, 0, 2, vertical_scale=-1)) == 0

    def test_zero_vertical_scale(self):
        """Test that a zero vertical scale does not raise."""
        assert len(ellipsoid_points(0, 0, 0, 2, vertical_scale=0)) == 0

    def test_tall_thin_box(self):
        """Test a box much larger than its fill returns only included points."""
        points = ellipsoid_points(0, 0, 0, 0.4, vertical_scale=1e6)

        # Only the x = z = 0 column qualifies, for |y| <= 400000
        assert points.shape == (800001, 3)
        assert not points[:, 0].any()
        assert not points[:, 2].any()
        assert points[:, 1].min() == -400000
        assert points[:, 1].max() == 400000

    def test_non_finite_inputs(self):
        """Test that NaN and infinite inputs yield nothing."""
        nan = float("nan")
        inf = float("inf")
        assert len(ellipsoid_points(nan, 0, 0, 2)) == 0
        assert len(ellipsoid_points(0, 0, 0, nan)) == 0
        assert len(ellipsoid_points(0, 0, 0, inf)) == 0
        assert len(ellipsoid_points(0, 0, 0, 2, vertical_scale=nan)) == 0


class TestFillEllipsoid(unittest.TestCase):
    """Tests for writing ellipsoids into a map."""

    def test_fill_writes_color(self):
        """Test that fill writes every included point with its color."""
        voxel_map = VoxelMap()
        fill_ellipsoid(voxel_map, 0, 0, 0, 2, 0x123456)

        assert len(voxel_map) == 33
        assert all(v.color == 0x123456 for v in voxel_map.values())

    def test_map_fill_method(self):
        """Test the VoxelMap.fill shortcut."""
        direct = VoxelMap()
        fill_ellipsoid(direct, 1.5, 2.5, -0.5, 3, 7, 1.3)

        shortcut = VoxelMap()
        shortcut.fill(1.5, 2.5, -0.5, 3, 7, vertical_scale=1.3)

        assert sorted(direct.values()) == sorted(shortcut.values())

    def test_overlap_overwrites(self):
        """Test that an inner fill paints over an outer one."""
        voxel_map = VoxelMap()
        voxel_map.fill(0, 0, 0, 4, 0x000001)
        outer_count = len(voxel_map)
        voxel_map.fill(0, 0, 0, 2, 0x000002)

        assert len(voxel_map) == outer_count
        assert voxel_map.get(0, 0, 0).color == 0x000002
        assert voxel_map.get(4, 0, 0).color == 0x000001

    def test_disjoint_fills_sum(self):
        """Test that three disjoint fills add up with no collisions."""
        calls = [
            (0, 0, 0, 2.0, 0xFF0000, 1.0),
            (20, 0, 0, 3.0, 0x00FF00, 0.5),
            (0, 30, -10, 1.5, 0x0000FF, 2.0),
        ]

        voxel_map = VoxelMap()
        expected = 0
        for cx, cy, cz, r, color, sy in calls:
            expected += len(ellipsoid_points(cx, cy, cz, r, sy))
            fill_ellipsoid(voxel_map, cx, cy, cz, r, color, sy)

        voxels = voxel_map.values()
        assert len(voxels) == expected
        assert len({(v.x, v.y, v.z) for v in voxels}) == expected
        assert {v.color for v in voxels} == {0xFF0000, 0x00FF00, 0x0000FF}

    def test_zero_radius_fill(self):
        """Test that a degenerate fill does not raise."""
        voxel_map = VoxelMap()
        fill_ellipsoid(voxel_map, 1.2, 1.2, 1.2, 0, 0xFFFFFF)
        assert len(voxel_map) <= 1


if __name__ == "__main__":
    unittest.main(verbosity=2)
