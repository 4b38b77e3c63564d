"""Command-line interface for heightmap generation."""

import argparse
import logging
import time
from pathlib import Path

import structlog


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the generate command."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural terrain heightmap"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a TOML config in configs/",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width (overrides config)")
    parser.add_argument("--height", type=int, default=None, help="Grid height (overrides config)")
    parser.add_argument(
        "--seed", type=int, default=None, help="Feature placement seed (overrides config)"
    )
    parser.add_argument(
        "--noise-seed", type=int, default=None, help="Perlin permutation seed (overrides config)"
    )
    parser.add_argument("--octaves", type=int, default=None, help="Octave count (overrides config)")
    parser.add_argument("--bumps", type=int, default=None, help="Feature bump count (overrides config)")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output .npz path (default from config: saves/heightmap.npz)",
    )
    parser.add_argument(
        "--preview",
        type=str,
        default=None,
        help="Also save a grayscale PNG preview to this path",
    )
    parser.add_argument(
        "--regenerate",
        type=int,
        default=0,
        metavar="N",
        help="Re-run the pipeline N more times with fresh feature placement",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for heightmap generation.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    import numpy as np

    from .config import HeightmapConfig, find_config, load_config
    from .exceptions import InvalidParametersError
    from .generator import generate, regenerate
    from .persistence import save_grid
    from .preview import save_preview

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError as e:
            logger.error("config_not_found", path=args.config, error=str(e))
            return 1
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = HeightmapConfig()
        logger.info("using_default_config")

    config = _apply_overrides(config, args)
    params = config.parameters

    output_path = Path(config.output.path)
    preview_path = Path(config.output.preview_path) if config.output.preview_path else None

    print(f"Generating {params.width}x{params.height} heightmap")
    print(f"Output: {output_path}")
    print()

    rng = np.random.default_rng(config.seed)

    start_time = time.time()
    try:
        grid = generate(params, rng=rng)
        for _ in range(args.regenerate):
            grid = regenerate(params, rng=rng)
    except InvalidParametersError as e:
        for error in e.errors:
            logger.error("invalid_parameter", error=error)
        return 1
    gen_time = time.time() - start_time

    print()
    print(f"Generation complete in {gen_time:.2f}s")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    saved_path = save_grid(output_path, grid, params)
    print(f"Saved to {saved_path}")

    if preview_path is not None:
        save_preview(preview_path, grid)
        print(f"Preview saved to {preview_path}")

    return 0


def _apply_overrides(config, args: argparse.Namespace):
    """Return a copy of the config with CLI flags applied."""
    param_updates = {
        name: value
        for name, value in (
            ("width", args.width),
            ("height", args.height),
            ("noise_seed", args.noise_seed),
            ("octave_count", args.octaves),
            ("bump_count", args.bumps),
        )
        if value is not None
    }
    parameters = config.parameters.model_copy(update=param_updates)

    output = config.output.model_copy()
    if args.output:
        output.path = args.output
    if args.preview:
        output.preview_path = args.preview

    seed = args.seed if args.seed is not None else config.seed
    return config.model_copy(update={"parameters": parameters, "output": output, "seed": seed})


if __name__ == "__main__":
    raise SystemExit(main())
