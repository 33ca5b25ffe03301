"""
Command-Line Interface for Voxel Animals

Usage:
    voxanimals lion
    voxanimals eagle rabbit --seed 7 --stats
    voxanimals --all -v
    voxanimals --list

"""

import argparse
import sys
from typing import List, Optional
import time

from . import __version__
from .generator import ModelGenerator
from .palette import DEFAULT_FLOOR_Y


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="voxanimals",
        description="Voxel Animals - Procedurally build voxel animal models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voxanimals lion
      Build the lion and print its voxel count

  voxanimals eagle rabbit --seed 7 --stats
      Build two models with reproducible foliage and print statistics

  voxanimals --all -v
      Build every model with progress output
        """
    )

    parser.add_argument(
        "models",
        nargs="*",
        help="Model name(s) to build (see --list)"
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Build every available model"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available models and exit"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible foliage (default: random)"
    )

    parser.add_argument(
        "--floor-y",
        type=float,
        default=DEFAULT_FLOOR_Y,
        help=f"Height of the ground plane (default: {DEFAULT_FLOOR_Y})"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print bounds, size and color breakdown"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with timings"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def print_stats(stats: dict):
    """Print the statistics block for one model."""
    (min_x, min_y, min_z), (max_x, max_y, max_z) = stats["bounds"]
    print(f"  Bounds: ({min_x}, {min_y}, {min_z}) .. ({max_x}, {max_y}, {max_z})")
    print(f"  Size: {stats['size'][0]} x {stats['size'][1]} x {stats['size'][2]}")
    print("  Colors:")
    for hex_color, count in stats["colors"].items():
        print(f"    {hex_color}: {count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    available = ModelGenerator.available_models()

    if args.list:
        for name in available:
            print(name)
        return 0

    names = available if args.all else [name.lower() for name in args.models]
    if not names:
        print("Error: No model specified (use --all or --list)", file=sys.stderr)
        return 1

    unknown = [name for name in names if name not in available]
    if unknown:
        print(f"Error: Unknown model(s): {', '.join(unknown)}", file=sys.stderr)
        return 1

    start_time = time.time()

    try:
        generator = ModelGenerator(seed=args.seed, floor_y=args.floor_y)

        for name in names:
            if args.verbose:
                print(f"Building: {name}")

            generator.build(name)
            print(f"{name}: {generator.voxel_count} voxels")

            if args.stats:
                print_stats(generator.get_stats())

        elapsed = time.time() - start_time
        if args.verbose:
            print(f"\nCompleted in {elapsed:.2f}s")

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
