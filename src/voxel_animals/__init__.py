"""
Voxel Animals
=============

Procedural voxel animal figures built from a small voxel assembly engine.

Models are composed by writing into a deduplicating sparse VoxelMap, either
one voxel at a time or through solid ellipsoid fills. The output of every
build is a flat list of colored integer-coordinate voxels, ready for any
downstream mesher or renderer.

Key Features:
- Sparse, unbounded voxel map with overwrite-wins deduplication
- Anisotropic ellipsoid rasterization with a Numba JIT kernel
- Thirteen built-in animals, reproducible through a seeded random source

Example Usage:
    from voxel_animals import ModelGenerator

    generator = ModelGenerator(seed=42)
    generator.build("turtle")
    voxels = generator.voxels
"""

__version__ = "1.0.0"
__author__ = "Voxel Animals Team"

from .voxel_map import Voxel, VoxelMap, round_coord
from .ellipsoid import ellipsoid_points, fill_ellipsoid
from .palette import Colors, ModelConfig
from .models import MODELS, build_model
from .generator import ModelGenerator, BatchBuilder

__all__ = [
    "Voxel",
    "VoxelMap",
    "round_coord",
    "ellipsoid_points",
    "fill_ellipsoid",
    "Colors",
    "ModelConfig",
    "MODELS",
    "build_model",
    "ModelGenerator",
    "BatchBuilder",
]
