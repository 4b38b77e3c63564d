"""Heightmap generation parameters and TOML configuration loading."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

PRESETS_DIR = Path(__file__).resolve().parents[2] / "configs"
PRESET_SUFFIX = ".toml"


class Offset(BaseModel, frozen=True):
    """Sample-space translation applied before noise lookup."""

    x: float = 0.0
    y: float = 0.0


class GenerationParameters(BaseModel, frozen=True):
    """Immutable parameters for one heightmap generation call.

    Cross-field constraints (elevation ordering, non-zero scale, ...) are
    checked by ``validation.validate_parameters`` so that every problem is
    reported at once with a domain error rather than on first failure.
    """

    width: int = Field(default=512, description="Grid cells along x")
    height: int = Field(default=512, description="Grid cells along z")
    noise_scale: float = Field(
        default=50.0, description="Divides sample coordinates (larger = smoother)"
    )
    min_elevation: float = Field(default=-20.0, description="Lower elevation bound")
    max_elevation: float = Field(default=50.0, description="Upper elevation bound")
    octave_count: int = Field(default=8, description="Number of noise layers summed")
    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")
    offset: Offset = Field(default_factory=Offset)
    bump_count: int = Field(default=5, description="Number of radial feature bumps")
    noise_seed: int = Field(default=0, description="Seed of the Perlin permutation table")


class OutputConfig(BaseModel):
    """Where the CLI writes its results."""

    path: str = Field(default="saves/heightmap.npz", description="Grid archive path")
    preview_path: str | None = Field(
        default=None, description="Optional grayscale PNG preview path"
    )


class HeightmapConfig(BaseModel):
    """Complete configuration for a generation run."""

    seed: int | None = Field(
        default=None, description="Feature placement seed (None = fresh entropy)"
    )
    parameters: GenerationParameters = Field(default_factory=GenerationParameters)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(config_path: Path) -> HeightmapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed HeightmapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return HeightmapConfig.model_validate(data)


def find_config(name: str, presets_dir: Path | None = None) -> Path:
    """Resolve a ``--config`` argument to a TOML file.

    A value with a directory part or a ``.toml`` suffix is taken as a file
    path. Anything else names a bundled preset, so ``rolling_hills`` resolves
    to ``configs/rolling_hills.toml``.

    Args:
        name: Preset name or config file path.
        presets_dir: Directory holding presets. Defaults to the bundled
            ``configs/`` directory.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If no matching file or preset exists.
    """
    candidate = Path(name)
    if candidate.suffix == PRESET_SUFFIX or len(candidate.parts) > 1:
        if not candidate.is_file():
            raise FileNotFoundError(f"Config file not found: {candidate}")
        return candidate

    presets_dir = presets_dir or PRESETS_DIR
    preset = presets_dir / f"{name}{PRESET_SUFFIX}"
    if preset.is_file():
        return preset

    available = ", ".join(list_configs(presets_dir)) or "none"
    raise FileNotFoundError(
        f"No heightmap preset '{name}' in {presets_dir} (available: {available})"
    )


def list_configs(presets_dir: Path | None = None) -> list[str]:
    """Names of the presets in ``presets_dir``, sorted."""
    presets_dir = presets_dir or PRESETS_DIR
    return sorted(p.stem for p in presets_dir.glob(f"*{PRESET_SUFFIX}") if p.is_file())
