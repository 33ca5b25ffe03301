"""
Main ModelGenerator Class

This is the primary interface for building voxel animals.
It orchestrates:
1. Random source and layout configuration
2. Model construction through the VoxelMap engine
3. Statistics and array views for downstream consumers

Example Usage:
    generator = ModelGenerator(seed=42)
    generator.build("elephant")
    print(generator.voxel_count)
    coords, colors = generator.to_sparse()
"""

from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np

from .color import to_hex, unpack_rgb
from .models import MODELS, build_model
from .palette import DEFAULT_FLOOR_Y, ModelConfig
from .voxel_map import Voxel


class ModelGenerator:
    """
    High-level interface for procedural voxel animals.

    Every build starts from a fresh VoxelMap, so one generator can build
    several models in turn. With a fixed seed, each build() call draws from
    a generator seeded identically, so rebuilding a model reproduces it.

    Attributes:
        seed: Seed for the random source, or None for fresh entropy
        config: Layout settings passed to the model builders
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        floor_y: float = DEFAULT_FLOOR_Y
    ):
        """
        Initialize the ModelGenerator.

        Args:
            seed: Seed for foliage randomness (None for non-reproducible)
            floor_y: World height of the ground plane
        """
        self.seed = seed
        self.config = ModelConfig(floor_y=floor_y)

        self._model_name: Optional[str] = None
        self._voxels: Optional[List[Voxel]] = None

    def build(self, name: str) -> "ModelGenerator":
        """
        Build a named model.

        Args:
            name: Model name, one of available_models()

        Returns:
            self for method chaining
        """
        rng = np.random.default_rng(self.seed)
        self._voxels = build_model(name, rng, self.config)
        self._model_name = name.lower()
        return self

    @staticmethod
    def available_models() -> List[str]:
        """Names of all buildable models, in display order."""
        return list(MODELS)

    def _require_model(self) -> List[Voxel]:
        if self._voxels is None:
            raise RuntimeError("No model built. Call build() first.")
        return self._voxels

    @property
    def model_name(self) -> Optional[str]:
        """Get the name of the current model."""
        return self._model_name

    @property
    def voxels(self) -> Optional[List[Voxel]]:
        """Get the current model's voxels."""
        return self._voxels

    @property
    def voxel_count(self) -> int:
        """Get the number of voxels in the current model."""
        if self._voxels is None:
            return 0
        return len(self._voxels)

    @property
    def bounds(self) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
        """
        Get inclusive bounds of the current model.

        Returns:
            ((min_x, min_y, min_z), (max_x, max_y, max_z))
        """
        coords, _ = self.to_sparse()
        if len(coords) == 0:
            return ((0, 0, 0), (0, 0, 0))
        return (
            tuple(int(c) for c in coords.min(axis=0)),
            tuple(int(c) for c in coords.max(axis=0))
        )

    def to_sparse(self, rgb: bool = False) -> Tuple[np.ndarray, np.ndarray]:
        """
        Convert the current model to arrays.

        Args:
            rgb: If True, unpack colors into (N, 3) uint8 components

        Returns:
            Tuple of (coordinates, colors) where:
            - coordinates: Array of shape (N, 3) with xyz indices
            - colors: Array of shape (N,) packed, or (N, 3) if rgb
        """
        voxels = self._require_model()

        coords = np.array(
            [(v.x, v.y, v.z) for v in voxels], dtype=np.int32
        ).reshape(-1, 3)
        colors = np.array([v.color for v in voxels], dtype=np.int64)

        if rgb:
            colors = unpack_rgb(colors)

        return coords, colors

    def get_stats(self) -> dict:
        """
        Get statistics for the current model.

        Returns:
            Dictionary with voxel count, bounds, size and per-color counts
        """
        voxels = self._require_model()

        min_xyz, max_xyz = self.bounds
        size = tuple(hi - lo + 1 for lo, hi in zip(min_xyz, max_xyz))

        color_counts: Dict[str, int] = {}
        for voxel in voxels:
            key = to_hex(voxel.color)
            color_counts[key] = color_counts.get(key, 0) + 1

        return {
            "model": self._model_name,
            "voxel_count": len(voxels),
            "bounds": (min_xyz, max_xyz),
            "size": size if voxels else (0, 0, 0),
            "colors": dict(
                sorted(color_counts.items(), key=lambda item: -item[1])
            ),
        }

    def preview(self) -> dict:
        """
        Get a preview of the current state.

        Returns:
            Dictionary with current state information
        """
        info = {
            "built": self._voxels is not None,
            "seed": self.seed,
            "floor_y": self.config.floor_y,
        }

        if self._voxels is not None:
            info["model"] = self._model_name
            info["voxel_count"] = len(self._voxels)
            info["bounds"] = self.bounds

        return info


class BatchBuilder:
    """
    Batch building for several models with consistent settings.
    """

    def __init__(self, **generator_kwargs):
        """
        Initialize the batch builder.

        Args:
            **generator_kwargs: Arguments passed to ModelGenerator
        """
        self.generator_kwargs = generator_kwargs

    def build_all(self, names: Optional[Sequence[str]] = None) -> Dict[str, dict]:
        """
        Build models and collect their statistics.

        Args:
            names: Model names to build (default: all)

        Returns:
            Mapping of model name to get_stats() output
        """
        names = list(names) if names else ModelGenerator.available_models()

        results = {}
        for name in names:
            generator = ModelGenerator(**self.generator_kwargs)
            generator.build(name)
            results[generator.model_name] = generator.get_stats()

        return results
