"""
Integration tests for ModelGenerator and the CLI.
"""

import io
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import numpy as np
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_animals import ModelGenerator, BatchBuilder
from voxel_animals.cli import main
from voxel_animals.color import to_hex, unpack_rgb


class TestColorHelpers(unittest.TestCase):
    """Tests for color conversion."""

    def test_unpack(self):
        """Test component unpacking."""
        assert unpack_rgb([0x123456]).tolist() == [[0x12, 0x34, 0x56]]

    def test_to_hex(self):
        """Test hex formatting."""
        assert to_hex(0x00FF0A) == "#00ff0a"

    def test_out_of_range(self):
        """Test invalid colors."""
        with self.assertRaises(ValueError):
            unpack_rgb([0x1000000])
        with self.assertRaises(ValueError):
            to_hex(-1)


class TestModelGenerator(unittest.TestCase):
    """Tests for the generator facade."""

    def test_basic_pipeline(self):
        """Test building a model."""
        generator = ModelGenerator(seed=1).build("bear")

        assert generator.model_name == "bear"
        assert generator.voxel_count > 0
        assert generator.voxel_count == len(generator.voxels)

    def test_requires_build(self):
        """Test calls before build()."""
        generator = ModelGenerator()
        assert generator.voxel_count == 0
        assert generator.preview() == {"built": False, "seed": None, "floor_y": -12.0}
        with self.assertRaises(RuntimeError):
            generator.get_stats()
        with self.assertRaises(RuntimeError):
            generator.to_sparse()

    def test_seed_reproducible(self):
        """Test that rebuilding with the same seed gives the same model."""
        generator = ModelGenerator(seed=99)
        first = sorted(generator.build("eagle").voxels)
        second = sorted(generator.build("eagle").voxels)
        assert first == second

    def test_to_sparse(self):
        """Test array conversion."""
        generator = ModelGenerator(seed=0).build("fish")
        coords, colors = generator.to_sparse()
        _, rgb = generator.to_sparse(rgb=True)

        n = generator.voxel_count
        assert coords.shape == (n, 3)
        assert colors.shape == (n,)
        assert rgb.shape == (n, 3)
        assert rgb.dtype == np.uint8

    def test_stats(self):
        """Test model statistics."""
        generator = ModelGenerator(seed=0, floor_y=-12).build("turtle")
        stats = generator.get_stats()

        assert stats["model"] == "turtle"
        assert stats["voxel_count"] == generator.voxel_count
        assert sum(stats["colors"].values()) == generator.voxel_count

        (min_x, min_y, min_z), (max_x, max_y, max_z) = stats["bounds"]
        assert stats["size"] == (max_x - min_x + 1, max_y - min_y + 1, max_z - min_z + 1)
        coords, _ = generator.to_sparse()
        assert min_y == coords[:, 1].min()

    def test_preview(self):
        """Test preview after a build."""
        generator = ModelGenerator(seed=3).build("snake")
        info = generator.preview()

        assert info["built"]
        assert info["model"] == "snake"
        assert info["voxel_count"] == generator.voxel_count

    def test_batch_builder(self):
        """Test batch building."""
        results = BatchBuilder(seed=5).build_all(["cat", "DOG"])

        assert list(results) == ["cat", "dog"]
        assert all(stats["voxel_count"] > 0 for stats in results.values())


class TestCLI(unittest.TestCase):
    """Tests for the command-line interface."""

    def run_cli(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_list(self):
        """Test listing models."""
        code, out, _ = self.run_cli(["--list"])
        assert code == 0
        assert out.split() == ModelGenerator.available_models()

    def test_build_with_stats(self):
        """Test building one model with statistics."""
        code, out, _ = self.run_cli(["lion", "--seed", "1", "--stats"])
        assert code == 0
        assert out.startswith("lion: ")
        assert "Bounds:" in out
        assert "Colors:" in out

    def test_unknown_model(self):
        """Test an unknown model name."""
        code, _, err = self.run_cli(["unicorn"])
        assert code == 1
        assert "unicorn" in err

    def test_no_model(self):
        """Test missing model arguments."""
        code, _, err = self.run_cli([])
        assert code == 1
        assert err.startswith("Error:")


if __name__ == "__main__":
    unittest.main(verbosity=2)
