"""Tests for the terrain generation CLI."""

import pytest
from PIL import Image

from isoworld.terrain.cli import main


class TestCli:
    """Tests for the isoworld-generate entry point."""

    def test_prints_summary(self, capsys) -> None:
        """Output reports size, seed, biome counts and validation."""
        main(["--width", "16", "--height", "12", "--seed", "2"])
        out = capsys.readouterr().out
        assert "Generating 16x12 world with seed 2" in out
        assert "deep_water" in out
        assert "Validation: passed" in out

    def test_writes_preview(self, tmp_path) -> None:
        """The preview is an RGBA PNG with one pixel per tile."""
        output = tmp_path / "previews" / "world.png"
        main(["--width", "10", "--height", "8", "--preview", str(output), "--jitter-seed", "3"])
        with Image.open(output) as image:
            assert image.size == (10, 8)
            assert image.mode == "RGBA"

    def test_config_file_with_overrides(self, tmp_path, capsys) -> None:
        """Command-line size overrides the config file."""
        path = tmp_path / "terrain.toml"
        path.write_text("seed = 4\nwidth = 9\nheight = 9\n")
        main(["--config", str(path), "--width", "6"])
        out = capsys.readouterr().out
        assert "Generating 6x9 world with seed 4" in out

    def test_invalid_dimension_exits(self) -> None:
        """Non-positive sizes exit with a usage error."""
        with pytest.raises(SystemExit):
            main(["--width", "0"])
