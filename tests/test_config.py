import pytest

from projplot.config import Config, get_default_config


def test_defaults_are_valid():
    config = get_default_config()
    assert config.validate() is True
    assert config.grid_resolution == 50


@pytest.mark.parametrize("kwargs", [
    {"default_dpi": 0},
    {"figure_width": -1},
    {"grid_alpha": 1.5},
    {"grid_resolution": 1},
    {"gridline_samples": 2.5},
    {"grid_expansion": -0.1},
    {"panel_background": ""},
])
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs).validate()


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_save_and_load(tmp_path, suffix):
    config = Config(default_dpi=72, panel_background="#1f2328")
    path = tmp_path / f"config{suffix}"
    config.save_to_file(path)

    loaded = Config.load_from_file(path)
    assert loaded == config


def test_load_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert Config.load_from_file(path) == Config()


def test_load_rejects_unknown_format(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("default_dpi = 10")
    with pytest.raises(ValueError, match="Unsupported"):
        Config.load_from_file(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load_from_file(tmp_path / "nope.yaml")


def test_load_rejects_unknown_fields(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output_dir: plots\n")
    with pytest.raises(TypeError):
        Config.load_from_file(path)
