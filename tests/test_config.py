"""Tests for heightmap configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from heightmap.config import (
    GenerationParameters,
    HeightmapConfig,
    Offset,
    OutputConfig,
    find_config,
    list_configs,
    load_config,
)


class TestGenerationParameters:
    """Tests for GenerationParameters."""

    def test_defaults(self):
        """Test default values."""
        params = GenerationParameters()
        assert params.width == 512
        assert params.height == 512
        assert params.noise_scale == 50.0
        assert params.min_elevation == -20.0
        assert params.max_elevation == 50.0
        assert params.octave_count == 8
        assert params.persistence == 0.5
        assert params.lacunarity == 2.0
        assert params.offset == Offset(x=0.0, y=0.0)
        assert params.bump_count == 5
        assert params.noise_seed == 0

    def test_frozen(self):
        """Parameters cannot change after construction."""
        params = GenerationParameters()
        with pytest.raises(ValidationError):
            params.width = 10

    def test_type_errors_rejected(self):
        """Non-numeric values fail at construction."""
        with pytest.raises(ValidationError):
            GenerationParameters(width="wide")

    def test_model_copy_update(self):
        params = GenerationParameters().model_copy(update={"octave_count": 2})
        assert params.octave_count == 2


class TestHeightmapConfig:
    """Tests for HeightmapConfig."""

    def test_defaults(self):
        """Test default values."""
        config = HeightmapConfig()
        assert config.seed is None
        assert config.parameters == GenerationParameters()
        assert config.output == OutputConfig()
        assert config.output.path == "saves/heightmap.npz"
        assert config.output.preview_path is None


class TestLoadConfig:
    """Tests for TOML loading."""

    def test_load_full(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text(
            "seed = 4\n"
            "[parameters]\n"
            "width = 64\n"
            "octave_count = 2\n"
            "[parameters.offset]\n"
            "x = 10.5\n"
            "[output]\n"
            'path = "out/custom.npz"\n'
        )
        config = load_config(path)
        assert config.seed == 4
        assert config.parameters.width == 64
        assert config.parameters.height == 512
        assert config.parameters.octave_count == 2
        assert config.parameters.offset == Offset(x=10.5, y=0.0)
        assert config.output.path == "out/custom.npz"

    def test_load_empty_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.toml"
        path.write_text("")
        assert load_config(path) == HeightmapConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_bundled_default_matches_model_defaults(self):
        config = load_config(find_config("default"))
        assert config.parameters == GenerationParameters()
        assert config.seed == 12345


class TestFindConfig:
    """Tests for config lookup."""

    @pytest.fixture
    def presets(self, tmp_path: Path) -> Path:
        presets_dir = tmp_path / "presets"
        presets_dir.mkdir()
        (presets_dir / "mesa.toml").write_text("seed = 1\n")
        (presets_dir / "dunes.toml").write_text("seed = 2\n")
        (presets_dir / "notes.txt").write_text("not a preset\n")
        return presets_dir

    def test_by_name(self):
        assert find_config("rolling_hills").name == "rolling_hills.toml"

    def test_by_name_in_presets_dir(self, presets: Path):
        assert find_config("mesa", presets_dir=presets) == presets / "mesa.toml"

    def test_by_path(self, tmp_path: Path):
        path = tmp_path / "mine.toml"
        path.write_text("")
        assert find_config(str(path)) == path

    def test_path_bypasses_presets_dir(self, tmp_path: Path, presets: Path):
        path = tmp_path / "elsewhere.toml"
        path.write_text("")
        assert find_config(str(path), presets_dir=presets) == path

    def test_missing_name(self):
        with pytest.raises(FileNotFoundError):
            find_config("does_not_exist")

    def test_missing_name_lists_available(self, presets: Path):
        with pytest.raises(FileNotFoundError, match="available: dunes, mesa"):
            find_config("canyon", presets_dir=presets)

    def test_missing_path(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            find_config(str(tmp_path / "gone.toml"))

    def test_directory_is_not_a_config(self, presets: Path):
        with pytest.raises(FileNotFoundError):
            find_config(str(presets))

    def test_list_configs(self):
        names = list_configs()
        assert "default" in names
        assert "rolling_hills" in names

    def test_list_configs_in_presets_dir(self, presets: Path):
        assert list_configs(presets) == ["dunes", "mesa"]

    def test_list_configs_missing_dir(self, tmp_path: Path):
        assert list_configs(tmp_path / "absent") == []
