#!/usr/bin/env python3
"""
Voxel Animals Demo Script

This script demonstrates the model pipeline by:
1. Building every built-in animal with a fixed seed
2. Printing voxel counts, bounds and build timings
3. Benchmarking ellipsoid fills at increasing radii

Run with: python examples/demo.py
"""

import sys
from pathlib import Path
import time

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_animals import ModelGenerator, VoxelMap


def run_demo(seed: int = 42):
    """Run the demonstration."""
    print("=" * 60)
    print("Voxel Animals - Demo")
    print("=" * 60)

    generator = ModelGenerator(seed=seed)
    total_start = time.time()

    for name in ModelGenerator.available_models():
        build_start = time.time()
        generator.build(name)
        build_time = time.time() - build_start

        stats = generator.get_stats()
        print(f"\n--- {name} ---")
        print(f"  Voxels: {stats['voxel_count']}")
        print(f"  Size: {stats['size'][0]} x {stats['size'][1]} x {stats['size'][2]}")
        print(f"  Colors: {len(stats['colors'])}")
        print(f"  Build time: {build_time*1000:.1f}ms")

    total_time = time.time() - total_start

    print("\n" + "=" * 60)
    print(f"Demo complete! Total time: {total_time:.2f}s")
    print("=" * 60)

    return 0


def benchmark_fill():
    """Benchmark ellipsoid fills."""
    print("\n--- Ellipsoid Fill Benchmark ---\n")

    # First call compiles the kernel
    VoxelMap().fill(0, 0, 0, 1, 0)

    for radius in [2, 4, 8, 16, 32]:
        voxel_map = VoxelMap()
        start = time.time()
        voxel_map.fill(0.5, 0.5, 0.5, radius, 0xFFFFFF, vertical_scale=1.2)
        elapsed = time.time() - start

        print(f"Radius {radius}: {len(voxel_map)} voxels in {elapsed*1000:.1f}ms")


if __name__ == "__main__":
    run_demo()

    # Uncomment to run benchmark
    # benchmark_fill()
