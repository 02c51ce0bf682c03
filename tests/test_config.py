import pytest

from antwerp.config import ANTWERP_SETTINGS, LatticeSettings, load_settings
from antwerp.numerics import FLOAT, FloatField, MpField


def test_defaults():
    settings = LatticeSettings()
    assert settings.side_length == 1.0
    assert settings.reference_tile == 0
    assert settings.precision is None
    assert settings.vertex_rotation_degrees == 180
    assert settings.field() is FLOAT


def test_field_selection():
    assert isinstance(LatticeSettings(tolerance=1e-8).field(), FloatField)
    assert LatticeSettings(tolerance=1e-8).field().tolerance == 1e-8
    num = LatticeSettings(precision=40).field()
    assert isinstance(num, MpField)
    assert num.dps == 40


@pytest.mark.parametrize("overrides", [
    {"side_length": 0},
    {"tolerance": -1e-6},
    {"reference_tile": -1},
    {"precision": 0},
    {"vertex_rotation_degrees": 360},
])
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        LatticeSettings(**overrides)


def test_from_mapping():
    settings = LatticeSettings.from_mapping({"side_length": "2", "precision": 30,
                                             "vertex_rotation_degrees": 120})
    assert settings.side_length == 2.0
    assert settings.precision == 30
    assert settings.vertex_rotation_degrees == 120
    assert settings.with_overrides(precision=None).precision is None


def test_from_mapping_unknown_key():
    with pytest.raises(ValueError) as excinfo:
        LatticeSettings.from_mapping({"side_length": 1.0, "colour": "red"})
    assert "colour" in str(excinfo.value)


def test_load_settings_from_path(tmp_path):
    path = tmp_path / "lattice.yaml"
    path.write_text("side_length: 2.5\ntolerance: 1.0e-7\nreference_tile: 1\n")
    settings = load_settings(path)
    assert settings.side_length == 2.5
    assert settings.tolerance == 1e-7
    assert settings.reference_tile == 1


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_settings(path) == LatticeSettings()


def test_load_settings_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("precision: 25\n")
    monkeypatch.setenv(ANTWERP_SETTINGS, str(path))
    assert load_settings().precision == 25


def test_load_settings_defaults(monkeypatch):
    monkeypatch.delenv(ANTWERP_SETTINGS, raising=False)
    assert load_settings() == LatticeSettings()


def test_load_settings_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_settings(path)
