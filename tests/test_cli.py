import pandas as pd
import pytest

from projplot.cli import main


@pytest.fixture
def europe_csv(europe, tmp_path):
    path = tmp_path / "europe.csv"
    europe.to_csv(path, index=False)
    return path


@pytest.fixture
def counts_csv(counts, tmp_path):
    path = tmp_path / "counts.csv"
    counts.to_csv(path, index=False)
    return path


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_presets_lists_projections(capsys):
    assert main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "robinson" in out
    assert "wintri" in out


def test_map_command(europe_csv, tmp_path):
    output = tmp_path / "map.png"
    code = main([
        "map", "--input", str(europe_csv), "--group", "group",
        "--proj", "wintri", "--output", str(output), "--dpi", "40", "--silent",
    ])
    assert code == 0
    assert output.exists()


def test_map_command_with_limits_and_config(europe_csv, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("default_dpi: 40\nfigure_width: 4\nfigure_height: 3\n")
    output = tmp_path / "limited.png"
    code = main([
        "map", "--input", str(europe_csv), "--geom", "point",
        "--xlim", "-30", "60", "--ylim", "20", "80",
        "--config", str(config_path), "--output", str(output), "-q",
    ])
    assert code == 0
    assert output.exists()


def test_map_command_missing_input(tmp_path, capsys):
    code = main(["map", "--input", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "x.png")])
    assert code == 1
    assert "Error" in capsys.readouterr().err


def test_map_command_bad_projection(europe_csv, tmp_path):
    code = main([
        "map", "--input", str(europe_csv), "--proj", "+proj=notaprojection",
        "--output", str(tmp_path / "x.png"), "--silent",
    ])
    assert code == 1


def test_lollipop_command(counts_csv, tmp_path):
    output = tmp_path / "lollipop.png"
    code = main([
        "lollipop", "--input", str(counts_csv), "--x", "year", "--y", "n",
        "--point-colour", "red", "--output", str(output), "--dpi", "40", "--silent",
    ])
    assert code == 0
    assert output.exists()


def test_project_command(europe_csv, europe, tmp_path):
    output = tmp_path / "out" / "projected.csv"
    code = main(["project", "--input", str(europe_csv), "--proj", "usa_albers", "--output", str(output), "-q"])
    assert code == 0

    projected = pd.read_csv(output)
    assert len(projected) == len(europe)
    assert list(projected.columns) == list(europe.columns)
    assert list(projected["city"]) == list(europe["city"])


def test_project_command_inverse_round_trip(europe_csv, tmp_path):
    forward = tmp_path / "forward.csv"
    back = tmp_path / "back.csv"
    assert main(["project", "--input", str(europe_csv), "--output", str(forward), "-q"]) == 0
    assert main(["project", "--input", str(forward), "--inverse", "--output", str(back), "-q"]) == 0

    original = pd.read_csv(europe_csv)
    restored = pd.read_csv(back)
    assert restored["long"].tolist() == pytest.approx(original["long"].tolist(), abs=1e-4)
    assert restored["lat"].tolist() == pytest.approx(original["lat"].tolist(), abs=1e-4)
