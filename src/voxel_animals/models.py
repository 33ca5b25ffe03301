"""
Animal Model Builders

Each builder owns one VoxelMap for the duration of a build, layers
ellipsoid fills and single-voxel details into it, and flattens it once at
the end. Later writes overwrite earlier ones, which is how details such as
bellies, eyes and stripes are painted over the base volumes.

Builders that scatter foliage draw from the injected numpy Generator only,
so passing a seeded generator reproduces a model exactly.

Example Usage:
    rng = np.random.default_rng(7)
    voxels = build_model("lion", rng)
"""

import math
from typing import Callable, Dict, Iterator, List, Optional, Tuple

import numpy as np

from .palette import Colors, ModelConfig
from .voxel_map import Voxel, VoxelMap


Builder = Callable[[np.random.Generator, ModelConfig], List[Voxel]]


def _steps(start: float, stop: float) -> Iterator[float]:
    """Yield start, start + 1, ... up to and including stop."""
    i = 0
    while start + i <= stop:
        yield start + i
        i += 1


def build_eagle(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Eagle perched on a leafy branch."""
    vm = VoxelMap()

    # Branch
    for x in range(-8, 8):
        y = math.sin(x * 0.2) * 1.5
        z = math.cos(x * 0.1) * 1.5
        vm.fill(x, y, z, 1.8, Colors.WOOD)
        if rng.random() > 0.7:
            vm.fill(x, y + 2, z + (rng.random() - 0.5) * 3, 1.5, Colors.GREEN)

    ex, ey, ez = 0, 2, 2
    vm.fill(ex, ey + 6, ez, 4.5, Colors.DARK, 1.4)

    # Chest
    for x in _steps(ex - 2, ex + 2):
        for y in _steps(ey + 4, ey + 9):
            vm.set(x, y, ez + 3, Colors.LIGHT)

    # Folded wings
    for x in (-4, -3, 3, 4):
        for y in _steps(ey + 4, ey + 10):
            for z in _steps(ez - 2, ez + 3):
                vm.set(x, y, z, Colors.DARK)

    # Tail
    for x in _steps(ex - 2, ex + 2):
        for y in _steps(ey, ey + 4):
            for z in _steps(ez - 5, ez - 3):
                vm.set(x, y, z, Colors.WHITE)

    hy, hz = ey + 12, ez + 1
    vm.fill(ex, hy, hz, 2.8, Colors.WHITE)
    vm.fill(ex, hy - 2, hz, 2.5, Colors.WHITE)

    for dx, dy in ((-2, 0), (-2, 1), (2, 0), (2, 1)):
        vm.set(ex + dx, ey + dy, ez, Colors.TALON)

    # Beak
    for dx, dz in ((0, 1), (0, 2), (1, 1), (-1, 1)):
        vm.set(ex + dx, hy, hz + 2 + dz, Colors.GOLD)
    vm.set(ex, hy - 1, hz + 3, Colors.GOLD)

    for dx in (-1.5, 1.5):
        vm.set(ex + dx, hy + 0.5, hz + 1.5, Colors.BLACK)
    for dx in (-1.5, 1.5):
        vm.set(ex + dx, hy + 1.5, hz + 1.5, Colors.WHITE)

    return vm.values()


def build_cat(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Sitting cat with a curled tail."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx - 3, cy + 2, cz, 2.2, Colors.DARK, 1.2)
    vm.fill(cx + 3, cy + 2, cz, 2.2, Colors.DARK, 1.2)

    # Tapered body with a white chest stripe
    for y in range(7):
        r = 3.5 - y * 0.2
        vm.fill(cx, cy + 2 + y, cz, r, Colors.DARK)
        vm.fill(cx, cy + 2 + y, cz + 2, r * 0.6, Colors.WHITE)

    for y in range(5):
        for z in (cz + 3, cz + 2):
            vm.set(cx - 1.5, cy + y, z, Colors.WHITE)
            vm.set(cx + 1.5, cy + y, z, Colors.WHITE)

    head_y = cy + 9
    vm.fill(cx, head_y, cz, 3.2, Colors.LIGHT, 0.8)

    for side in (-2, 2):
        vm.set(cx + side, head_y + 3, cz, Colors.DARK)
        vm.set(cx + side * 0.8, head_y + 3, cz + 1, Colors.WHITE)
        vm.set(cx + side, head_y + 4, cz, Colors.DARK)

    # Tail wraps around the front, skipping the back arc
    for i in range(12):
        a = i * 0.3
        tx = math.cos(a) * 4.5
        tz = math.sin(a) * 4.5
        if tz > -2:
            vm.set(cx + tx, cy, cz + tz, Colors.DARK)
            vm.set(cx + tx, cy + 1, cz + tz, Colors.DARK)

    vm.set(cx - 1, head_y + 0.5, cz + 2.5, Colors.GOLD)
    vm.set(cx + 1, head_y + 0.5, cz + 2.5, Colors.GOLD)
    vm.set(cx - 1, head_y + 0.5, cz + 3, Colors.BLACK)
    vm.set(cx + 1, head_y + 0.5, cz + 3, Colors.BLACK)
    vm.set(cx, head_y, cz + 3, Colors.TALON)

    return vm.values()


def build_rabbit(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Rabbit sitting on a mossy log."""
    vm = VoxelMap()
    log_y = config.floor_y + 2.5
    rx, rz = 0, 0

    for x in range(-6, 7):
        radius = 2.8 + math.sin(x * 0.5) * 0.2
        vm.fill(x, log_y, 0, radius, Colors.DARK)
        if x in (-6, 6):
            # Exposed end grain
            vm.fill(x, log_y, 0, radius - 0.5, Colors.WOOD)
        if rng.random() > 0.8:
            vm.set(x, log_y + radius, (rng.random() - 0.5) * 2, Colors.GREEN)

    by = log_y + 2.5
    vm.fill(rx - 1.5, by + 1.5, rz - 1.5, 1.8, Colors.WHITE)
    vm.fill(rx + 1.5, by + 1.5, rz - 1.5, 1.8, Colors.WHITE)
    vm.fill(rx, by + 2, rz, 2.2, Colors.WHITE, 0.8)
    vm.fill(rx, by + 2.5, rz + 1.5, 1.5, Colors.WHITE)
    vm.set(rx - 1.2, by, rz + 2.2, Colors.LIGHT)
    vm.set(rx + 1.2, by, rz + 2.2, Colors.LIGHT)
    vm.set(rx - 2.2, by, rz - 0.5, Colors.WHITE)
    vm.set(rx + 2.2, by, rz - 0.5, Colors.WHITE)
    vm.fill(rx, by + 1.5, rz - 2.5, 1.0, Colors.WHITE)

    hy, hz = by + 4.5, rz + 1
    vm.fill(rx, hy, hz, 1.7, Colors.WHITE)
    vm.fill(rx - 1.1, hy - 0.5, hz + 0.5, 1.0, Colors.WHITE)
    vm.fill(rx + 1.1, hy - 0.5, hz + 0.5, 1.0, Colors.WHITE)

    # Ears lean back as they rise
    for y in range(5):
        curve = y * 0.2
        for side in (-1, 1):
            vm.set(rx + side * 0.8, hy + 1.5 + y, hz - curve, Colors.WHITE)
            vm.set(rx + side * 1.2, hy + 1.5 + y, hz - curve, Colors.WHITE)
            vm.set(rx + side * 1.0, hy + 1.5 + y, hz - curve + 0.5, Colors.LIGHT)

    vm.set(rx - 0.8, hy + 0.2, hz + 1.5, Colors.BLACK)
    vm.set(rx + 0.8, hy + 0.2, hz + 1.5, Colors.BLACK)
    vm.set(rx, hy - 0.5, hz + 1.8, Colors.TALON)

    return vm.values()


def _mini_eagle(
    vm: VoxelMap,
    rng: np.random.Generator,
    offset_x: float,
    offset_z: float
):
    for x in range(-5, 5):
        y = math.sin(x * 0.4) * 0.5
        vm.fill(offset_x + x, y, offset_z, 1.2, Colors.WOOD)
        if rng.random() > 0.8:
            vm.fill(offset_x + x, y + 1, offset_z, 1, Colors.GREEN)

    ex, ey, ez = offset_x, 1.5, offset_z
    vm.fill(ex, ey + 4, ez, 3.0, Colors.DARK, 1.4)

    for x in _steps(ex - 1, ex + 1):
        for y in _steps(ey + 2, ey + 6):
            vm.set(x, y, ez + 2, Colors.LIGHT)
    for x in _steps(ex - 1, ex + 1):
        for y in _steps(ey + 2, ey + 3):
            vm.set(x, y, ez - 3, Colors.WHITE)
    for y in _steps(ey + 2, ey + 6):
        for z in _steps(ez - 1, ez + 2):
            vm.set(ex - 3, y, z, Colors.DARK)
            vm.set(ex + 3, y, z, Colors.DARK)

    hy, hz = ey + 8, ez + 1
    vm.fill(ex, hy, hz, 2.0, Colors.WHITE)
    vm.set(ex, hy, hz + 2, Colors.GOLD)
    vm.set(ex, hy - 0.5, hz + 2, Colors.GOLD)
    vm.set(ex - 1, hy + 0.5, hz + 1, Colors.BLACK)
    vm.set(ex + 1, hy + 0.5, hz + 1, Colors.BLACK)
    vm.set(ex - 1, ey, ez, Colors.TALON)
    vm.set(ex + 1, ey, ez, Colors.TALON)


def build_twins(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Two small eagles on separate branches."""
    vm = VoxelMap()
    _mini_eagle(vm, rng, -10, 2)
    _mini_eagle(vm, rng, 10, -2)
    return vm.values()


def build_dog(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Sitting dog with floppy ears."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx - 2.5, cy + 2, cz - 1, 2.0, Colors.WOOD, 1.2)
    vm.fill(cx + 2.5, cy + 2, cz - 1, 2.0, Colors.WOOD, 1.2)

    for y in range(8):
        r = 3.8 - y * 0.15
        vm.fill(cx, cy + 2 + y, cz, r, Colors.WOOD)
        vm.fill(cx, cy + 2 + y, cz + 2.5, r * 0.5, Colors.LIGHT)

    for y in range(6):
        for z in (cz + 3.5, cz + 2.5):
            vm.set(cx - 1.5, cy + y, z, Colors.LIGHT)
            vm.set(cx + 1.5, cy + y, z, Colors.LIGHT)

    head_y = cy + 10
    vm.fill(cx, head_y, cz + 1, 3.5, Colors.WOOD, 0.9)
    vm.fill(cx, head_y - 1, cz + 3.5, 2.0, Colors.LIGHT, 0.8)
    vm.set(cx, head_y - 0.5, cz + 5.5, Colors.BLACK)

    for y in range(4):
        for side in (-3.5, 3.5):
            vm.set(cx + side, head_y + 1 - y, cz, Colors.DARK)
            vm.set(cx + side, head_y + 1 - y, cz + 1, Colors.WOOD)

    # Wagging tail
    for i in range(8):
        tx = math.sin(i * 0.5) * 1.5
        vm.set(cx + tx, cy + 3 + i * 0.8, cz - 4 - i * 0.5, Colors.WOOD)

    vm.set(cx - 1.5, head_y + 1, cz + 4, Colors.BLACK)
    vm.set(cx + 1.5, head_y + 1, cz + 4, Colors.BLACK)

    return vm.values()


def build_turtle(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Turtle with a domed two-tone shell."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx, cy + 3, cz, 6, Colors.GREEN, 0.6)
    vm.fill(cx, cy + 4, cz, 5, Colors.DARK, 0.5)

    for dz in (3, -3):
        for dx in (-4, 4):
            vm.fill(cx + dx, cy + 1, cz + dz, 2, Colors.WOOD)

    vm.fill(cx, cy + 2, cz + 6, 2.5, Colors.WOOD)
    vm.set(cx - 1, cy + 3, cz + 8, Colors.BLACK)
    vm.set(cx + 1, cy + 3, cz + 8, Colors.BLACK)
    vm.fill(cx, cy + 1.5, cz - 5, 1.5, Colors.WOOD)

    return vm.values()


def build_squirrel(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Squirrel with a bushy upturned tail."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx - 1.5, cy + 1, cz, 1.5, Colors.WOOD, 1.2)
    vm.fill(cx + 1.5, cy + 1, cz, 1.5, Colors.WOOD, 1.2)

    for y in range(6):
        r = 2.8 - y * 0.15
        vm.fill(cx, cy + 1 + y, cz, r, Colors.WOOD)
        vm.fill(cx, cy + 1 + y, cz + 1.5, r * 0.6, Colors.WHITE)

    head_y = cy + 7
    vm.fill(cx, head_y, cz + 0.5, 2.5, Colors.WOOD, 0.9)
    vm.fill(cx, head_y - 0.5, cz + 2.5, 1.2, Colors.WHITE, 0.8)
    vm.set(cx, head_y, cz + 3.5, Colors.BLACK)

    for side in (-1.5, 1.5):
        vm.set(cx + side, head_y + 2, cz, Colors.WOOD)
        vm.set(cx + side, head_y + 3, cz, Colors.WOOD)

    # Tail thickest in the middle of the curve
    for i in range(12):
        ty = cy + 1 + i * 0.8
        tz = cz - 2 - math.sin(i * 0.3) * 3
        vm.fill(cx, ty, tz, 2.5 - abs(i - 6) * 0.15, Colors.WOOD)

    vm.set(cx - 1, head_y + 0.5, cz + 2.5, Colors.BLACK)
    vm.set(cx + 1, head_y + 0.5, cz + 2.5, Colors.BLACK)

    return vm.values()


def build_fish(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Fish hovering above the floor."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 6, 0

    vm.fill(cx, cy, cz, 5, Colors.BLUE, 0.7)

    for x in range(cx - 3, cx + 4):
        for z in range(cz - 1, cz + 2):
            vm.set(x, cy - 2, z, Colors.WHITE)
            vm.set(x, cy - 3, z, Colors.WHITE)

    # Dorsal fin
    for x in range(cx - 2, cx + 2):
        vm.set(x, cy + 3, cz, Colors.GOLD)
        vm.set(x, cy + 4, cz, Colors.GOLD)
        if x > cx - 2:
            vm.set(x, cy + 5, cz, Colors.GOLD)

    # Tail fin fans out
    for y in range(-3, 4):
        vm.set(cx - 6, cy + y, cz, Colors.GOLD)
        vm.set(cx - 7, cy + y * 1.3, cz, Colors.GOLD)
        if abs(y) > 1:
            vm.set(cx - 8, cy + y * 1.5, cz, Colors.GOLD)

    for i in range(3):
        vm.set(cx + 1 - i, cy - 2, cz + 3 + i, Colors.BLUE)
        vm.set(cx + 1 - i, cy - 2, cz - 3 - i, Colors.BLUE)

    for z in (cz + 2, cz - 2):
        vm.set(cx + 3, cy + 1, z, Colors.BLACK)
    for z in (cz + 2, cz - 2):
        vm.set(cx + 3, cy + 1.5, z, Colors.WHITE)

    vm.set(cx + 5, cy, cz, Colors.RED)

    for x in range(cx - 3, cx + 4, 2):
        for z in range(cz - 2, cz + 3, 2):
            vm.set(x, cy + 1, z, Colors.SCALE_BLUE)

    return vm.values()


def build_elephant(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Elephant with a curled trunk and tusks."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx, cy + 7, cz, 6, Colors.GRAY, 0.9)

    for x in range(cx - 3, cx + 4):
        for z in range(cz - 3, cz + 4):
            vm.set(x, cy + 3, z, Colors.DARK_GRAY)

    leg_offsets = ((-4, 3), (4, 3), (-4, -3), (4, -3))
    for y in range(6):
        for ox, oz in leg_offsets:
            vm.fill(cx + ox, cy + y, cz + oz, 2, Colors.GRAY)

    # Toenails
    for ox, oz in ((-4, 3), (-4, -3), (4, 3), (4, -3)):
        vm.set(cx + ox - 1, cy, cz + oz, Colors.IVORY)
        vm.set(cx + ox + 1, cy, cz + oz, Colors.IVORY)
        vm.set(cx + ox, cy, cz + oz + 1, Colors.IVORY)

    hy = cy + 12
    vm.fill(cx, hy, cz + 4, 4, Colors.GRAY, 0.9)
    vm.set(cx - 2.5, hy + 1, cz + 7, Colors.BLACK)
    vm.set(cx + 2.5, hy + 1, cz + 7, Colors.BLACK)

    # Ear flaps
    for y in range(-2, 4):
        for z in range(4):
            vm.set(cx - 5, hy + y, cz + 2 + z, Colors.DARK_GRAY)
            vm.set(cx + 5, hy + y, cz + 2 + z, Colors.DARK_GRAY)
            if abs(y) < 2:
                vm.set(cx - 6, hy + y, cz + 3 + z * 0.5, Colors.GRAY)
                vm.set(cx + 6, hy + y, cz + 3 + z * 0.5, Colors.GRAY)

    # Trunk curves down and forward, thinning
    for i in range(10):
        ty = hy - 1 - i * 0.8
        tz = cz + 7 + i * 0.5
        vm.fill(cx, ty, tz, 1.5 - i * 0.08, Colors.GRAY)

    for i in range(5):
        vm.set(cx - 1.5, hy - 2 - i, cz + 6 + i * 0.3, Colors.IVORY)
        vm.set(cx + 1.5, hy - 2 - i, cz + 6 + i * 0.3, Colors.IVORY)

    for i in range(5):
        vm.set(cx, cy + 10 - i, cz - 6 - i * 0.5, Colors.DARK_GRAY)
    vm.set(cx - 0.5, cy + 5, cz - 9, Colors.DARK_GRAY)
    vm.set(cx + 0.5, cy + 5, cz - 9, Colors.DARK_GRAY)

    return vm.values()


def build_lion(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Standing lion with a ring mane."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    for y in range(7):
        vm.fill(cx, cy + 3 + y, cz, 3.5 - y * 0.15, Colors.GOLD)

    for x in range(cx - 2, cx + 3):
        for y in _steps(cy + 3, cy + 6):
            vm.set(x, y, cz + 3, Colors.WHITE)

    for y in range(5):
        for ox, oz in ((-2.5, 2), (2.5, 2), (-2.5, -2), (2.5, -2)):
            vm.fill(cx + ox, cy + y, cz + oz, 1.5, Colors.GOLD)

    hy = cy + 10
    vm.fill(cx, hy, cz + 1, 3, Colors.GOLD, 0.9)

    # Mane
    a = 0.0
    while a < math.pi * 2:
        mx = math.cos(a) * 4
        my = math.sin(a) * 3.5
        vm.fill(cx + mx, hy + my * 0.8, cz, 1.5, Colors.ORANGE)
        vm.fill(cx + mx * 0.8, hy + my * 0.7, cz - 0.5, 1.2, Colors.ORANGE)
        a += 0.4

    vm.fill(cx, hy - 1, cz + 3.5, 1.8, Colors.WHITE, 0.7)
    vm.set(cx, hy - 0.5, cz + 5, Colors.BLACK)
    vm.set(cx - 1, hy - 2, cz + 4, Colors.RED)
    vm.set(cx + 1, hy - 2, cz + 4, Colors.RED)

    vm.set(cx - 1.5, hy + 1, cz + 3, Colors.BLACK)
    vm.set(cx + 1.5, hy + 1, cz + 3, Colors.BLACK)
    vm.set(cx - 1.5, hy + 1.5, cz + 3, Colors.GOLD)
    vm.set(cx + 1.5, hy + 1.5, cz + 3, Colors.GOLD)

    vm.set(cx - 2, hy + 3, cz + 1, Colors.GOLD)
    vm.set(cx + 2, hy + 3, cz + 1, Colors.GOLD)

    for i in range(10):
        tz = cz - 4 - i * 0.8
        ty = cy + 6 + math.sin(i * 0.4) * 2
        vm.set(cx, ty, tz, Colors.GOLD)
    vm.fill(cx, cy + 6, cz - 12, 1.5, Colors.ORANGE)

    return vm.values()


SNAKE_COILS = 3
SNAKE_SEGMENTS = 60


def _coil_point(i: int, cx: float, cy: float, cz: float) -> Tuple[float, float, float]:
    """Position of body segment i on the rising, tightening coil."""
    t = i / SNAKE_SEGMENTS
    angle = t * math.pi * 2 * SNAKE_COILS
    radius = 6 - t * 3
    return (
        cx + math.cos(angle) * radius,
        cy + t * 12,
        cz + math.sin(angle) * radius,
    )


def build_snake(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Coiled snake with banded scales."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    for i in range(SNAKE_SEGMENTS):
        px, py, pz = _coil_point(i, cx, cy, cz)
        body_radius = 1.5 - (i / SNAKE_SEGMENTS) * 0.3
        color = Colors.GREEN if i % 6 < 3 else Colors.DARK
        vm.fill(px, py, pz, body_radius, color)

    head_y = cy + 12.5
    vm.fill(cx - 1, head_y, cz - 1, 2.5, Colors.GREEN, 0.8)

    vm.set(cx - 2.5, head_y + 1, cz + 0.5, Colors.GOLD)
    vm.set(cx + 0.5, head_y + 1, cz + 0.5, Colors.GOLD)
    vm.set(cx - 2.5, head_y + 1.5, cz + 0.5, Colors.BLACK)
    vm.set(cx + 0.5, head_y + 1.5, cz + 0.5, Colors.BLACK)

    # Forked tongue
    vm.set(cx - 1, head_y - 0.5, cz + 2, Colors.RED)
    vm.set(cx - 1, head_y - 0.5, cz + 3, Colors.RED)
    vm.set(cx - 1.5, head_y - 0.5, cz + 4, Colors.RED)
    vm.set(cx - 0.5, head_y - 0.5, cz + 4, Colors.RED)

    for i in range(0, SNAKE_SEGMENTS, 4):
        px, py, pz = _coil_point(i, cx, cy, cz)
        vm.set(px, py + 1.5, pz, Colors.GOLD)

    return vm.values()


def build_bear(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Bulky sitting bear."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx, cy + 6, cz, 5, Colors.DARK, 1.1)

    for x in range(cx - 3, cx + 4):
        for y in _steps(cy + 3, cy + 7):
            vm.set(x, y, cz + 4, Colors.LIGHT)

    vm.fill(cx - 3, cy + 2, cz + 1, 2.5, Colors.DARK, 1.1)
    vm.fill(cx + 3, cy + 2, cz + 1, 2.5, Colors.DARK, 1.1)
    vm.fill(cx - 2, cy + 4, cz + 4, 1.8, Colors.DARK)
    vm.fill(cx + 2, cy + 4, cz + 4, 1.8, Colors.DARK)
    vm.set(cx - 2, cy + 3, cz + 5.5, Colors.LIGHT)
    vm.set(cx + 2, cy + 3, cz + 5.5, Colors.LIGHT)

    for y in range(4):
        for z in (cz + 3, cz + 2):
            vm.set(cx - 2, cy + y, z, Colors.DARK)
            vm.set(cx + 2, cy + y, z, Colors.DARK)

    hy = cy + 11
    vm.fill(cx, hy, cz + 1, 3.5, Colors.DARK, 0.9)
    vm.fill(cx, hy - 1, cz + 4, 2.0, Colors.LIGHT, 0.7)
    vm.set(cx, hy - 0.5, cz + 5.5, Colors.BLACK)
    vm.set(cx - 0.5, hy - 2, cz + 4.5, Colors.BLACK)
    vm.set(cx + 0.5, hy - 2, cz + 4.5, Colors.BLACK)
    vm.set(cx - 1.5, hy + 0.5, cz + 3.5, Colors.BLACK)
    vm.set(cx + 1.5, hy + 0.5, cz + 3.5, Colors.BLACK)

    # Round ears with lighter insides
    vm.fill(cx - 2.5, hy + 3, cz, 1.2, Colors.DARK)
    vm.fill(cx + 2.5, hy + 3, cz, 1.2, Colors.DARK)
    vm.fill(cx - 2.5, hy + 3, cz + 0.5, 0.8, Colors.LIGHT)
    vm.fill(cx + 2.5, hy + 3, cz + 0.5, 0.8, Colors.LIGHT)

    vm.fill(cx, cy + 8, cz - 5, 1.5, Colors.DARK)

    return vm.values()


def build_dinosaur(rng: np.random.Generator, config: ModelConfig) -> List[Voxel]:
    """Upright theropod with spines and a long tail."""
    vm = VoxelMap()
    cx, cy, cz = 0, config.floor_y + 1, 0

    vm.fill(cx, cy + 8, cz, 5, Colors.GREEN, 1.2)

    for x in range(cx - 3, cx + 4):
        for y in _steps(cy + 5, cy + 9):
            vm.set(x, y, cz + 4, Colors.WHITE)

    for y in range(7):
        vm.fill(cx - 3, cy + y, cz, 2, Colors.GREEN)
        vm.fill(cx + 3, cy + y, cz, 2, Colors.GREEN)

    vm.fill(cx - 3, cy, cz + 1.5, 2.5, Colors.GREEN, 0.5)
    vm.fill(cx + 3, cy, cz + 1.5, 2.5, Colors.GREEN, 0.5)
    vm.set(cx - 3, cy, cz + 4, Colors.IVORY)
    vm.set(cx + 3, cy, cz + 4, Colors.IVORY)
    vm.set(cx - 4, cy, cz + 3.5, Colors.IVORY)
    vm.set(cx + 4, cy, cz + 3.5, Colors.IVORY)

    # Stubby arms
    for i in range(3):
        vm.set(cx - 4, cy + 9 - i, cz + 3 + i, Colors.GREEN)
        vm.set(cx + 4, cy + 9 - i, cz + 3 + i, Colors.GREEN)
    vm.set(cx - 4, cy + 6, cz + 6, Colors.IVORY)
    vm.set(cx + 4, cy + 6, cz + 6, Colors.IVORY)

    for y in range(5):
        vm.fill(cx, cy + 11 + y, cz + 2 + y * 0.5, 2.5 - y * 0.2, Colors.GREEN)

    hy, hz = cy + 16, cz + 5
    vm.fill(cx, hy, hz, 3.5, Colors.GREEN, 0.8)
    vm.fill(cx, hy - 1.5, hz + 2, 2.5, Colors.GREEN, 0.5)

    for x in range(-1, 2):
        vm.set(cx + x, hy - 2, hz + 3.5, Colors.IVORY)
        vm.set(cx + x, hy - 0.5, hz + 4, Colors.IVORY)

    vm.set(cx - 2, hy + 1, hz + 2.5, Colors.RED)
    vm.set(cx + 2, hy + 1, hz + 2.5, Colors.RED)
    vm.set(cx - 2, hy + 1.5, hz + 2.5, Colors.BLACK)
    vm.set(cx + 2, hy + 1.5, hz + 2.5, Colors.BLACK)
    vm.set(cx - 1, hy, hz + 4, Colors.DARK)
    vm.set(cx + 1, hy, hz + 4, Colors.DARK)

    for i in range(12):
        sz = cz - 2 + i * 0.8
        sy = cy + 10 + math.sin(i * 0.3) * 2
        vm.set(cx, sy + 3, sz, Colors.ORANGE)
        vm.set(cx, sy + 4, sz, Colors.ORANGE)

    # Tail tapers to a minimum thickness
    for i in range(15):
        tz = cz - 5 - i * 1.2
        ty = cy + 7 - i * 0.3
        vm.fill(cx, ty, tz, max(2.5 - i * 0.12, 0.5), Colors.GREEN)
    vm.set(cx, cy + 2, cz - 22, Colors.DARK)

    return vm.values()


MODELS: Dict[str, Builder] = {
    "eagle": build_eagle,
    "cat": build_cat,
    "rabbit": build_rabbit,
    "twins": build_twins,
    "dog": build_dog,
    "turtle": build_turtle,
    "squirrel": build_squirrel,
    "fish": build_fish,
    "elephant": build_elephant,
    "lion": build_lion,
    "snake": build_snake,
    "bear": build_bear,
    "dinosaur": build_dinosaur,
}


def build_model(
    name: str,
    rng: Optional[np.random.Generator] = None,
    config: Optional[ModelConfig] = None
) -> List[Voxel]:
    """
    Build a named model.

    Args:
        name: Model name (case-insensitive), one of MODELS
        rng: Random source for foliage; a fresh unseeded generator if None
        config: Layout settings; defaults if None

    Returns:
        The model's voxels, one per distinct coordinate
    """
    key = name.lower()
    if key not in MODELS:
        raise KeyError(
            f"Unknown model: {name!r}. Available: {', '.join(MODELS)}"
        )

    if rng is None:
        rng = np.random.default_rng()
    if config is None:
        config = ModelConfig()

    return MODELS[key](rng, config)
