import pytest

from climatesum.config import AnalyzerConfig, load_config
from climatesum.errors import ConfigError


def test_defaults():
  cfg = load_config()
  assert cfg == AnalyzerConfig()
  assert cfg.timezone == "UTC"
  assert cfg.missing_files == "skip"
  assert cfg.invalid_numbers == "skip"
  assert cfg.max_regions is None


def test_yaml_with_overrides(tmp_path):
  path = tmp_path / "cfg.yaml"
  path.write_text("missing_files: halt\nmax_regions: 50\nshow_pressure: true\n", encoding="utf-8")
  cfg = load_config(path, max_regions=None, invalid_numbers="zero")
  assert cfg.missing_files == "halt"
  assert cfg.max_regions == 50
  assert cfg.show_pressure is True
  assert cfg.invalid_numbers == "zero"


def test_empty_yaml(tmp_path):
  path = tmp_path / "empty.yaml"
  path.write_text("", encoding="utf-8")
  assert load_config(path) == AnalyzerConfig()


def test_invalid_values(tmp_path):
  with pytest.raises(ConfigError):
    load_config(missing_files="maybe")
  with pytest.raises(ConfigError):
    load_config(max_regions=0)
  with pytest.raises(ConfigError):
    load_config(timezone="Mars/Olympus_Mons")


def test_unreadable_config(tmp_path):
  with pytest.raises(ConfigError):
    load_config(tmp_path / "absent.yaml")
  path = tmp_path / "list.yaml"
  path.write_text("- a\n- b\n", encoding="utf-8")
  with pytest.raises(ConfigError):
    load_config(path)
