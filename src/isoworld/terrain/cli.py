"""Command-line interface for terrain generation."""

import argparse
import logging
import time
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for terrain generation."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural island world"
    )
    parser.add_argument(
        "--width", type=int, default=None, help="World width (default: 128)"
    )
    parser.add_argument(
        "--height", type=int, default=None, help="World height (default: 128)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="World seed (default: 0)"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="TOML terrain config (flags override its values)",
    )
    parser.add_argument(
        "--preview",
        "-o",
        type=str,
        default=None,
        help="Write a 1-pixel-per-tile PNG of tile colors (optional)",
    )
    parser.add_argument(
        "--jitter-seed",
        type=int,
        default=None,
        help="Seed for cosmetic color variation (default: unseeded)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Import here to avoid slow startup for --help
    import numpy as np

    from ..exceptions import InvalidDimensionError
    from .config import TerrainConfig, load_config
    from .generator import generate_terrain
    from .validation import validate_world

    config = load_config(Path(args.config)) if args.config else TerrainConfig()
    overrides = {
        key: value
        for key, value in (
            ("width", args.width),
            ("height", args.height),
            ("seed", args.seed),
        )
        if value is not None
    }
    config = config.model_copy(update=overrides)

    print(f"Generating {config.width}x{config.height} world with seed {config.seed}")
    print()

    rng = np.random.default_rng(args.jitter_seed)
    start_time = time.time()
    try:
        result = generate_terrain(config, rng)
    except InvalidDimensionError as e:
        parser.error(str(e))
    gen_time = time.time() - start_time

    print()
    print(f"Generation complete in {gen_time:.2f}s")

    grid = result.grid
    total = len(grid)
    for kind, count in grid.biome_counts().items():
        print(f"  {kind.value:<14} {count:>8,} ({count / total:.1%})")

    validation = validate_world(grid, config)
    print(f"Validation: {'passed' if validation.passed else 'FAILED'}")

    if args.preview:
        output_path = Path(args.preview)
        save_preview(grid, output_path)
        print(f"Preview saved to {output_path}")


def save_preview(grid, output_path: Path) -> None:
    """Save tile colors as a 1-pixel-per-tile RGBA image.

    Args:
        grid: Generated WorldGrid.
        output_path: Destination PNG path.
    """
    import numpy as np
    from PIL import Image

    pixels = np.array(
        [[tile.color.as_tuple() for tile in row] for row in grid.rows()],
        dtype=np.uint8,
    ).reshape(grid.height, grid.width, 4)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(pixels).save(output_path)


if __name__ == "__main__":
    main()
