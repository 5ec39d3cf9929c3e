from click.testing import CliRunner

from climatesum.cli.analyze import main

from conftest import K_50F, tdv_line


def test_report_on_stdout(tn_wa_files):
  tn, wa = tn_wa_files
  result = CliRunner().invoke(main, [str(tn), str(wa)])
  assert result.exit_code == 0, result.output
  lines = result.stdout.splitlines()
  assert lines[0] == "States found: TN WA"
  assert "Number of Records: 3" in lines
  assert "Average Temperature: 60.0F" in lines
  assert "Max Temperature: 70.0F" in lines
  assert "Min Temperature: 50.0F" in lines
  assert "Max Temperature on: Mon Aug  3 11:00:00 2015" in lines
  assert "Opening file" not in result.stdout


def test_no_files_is_usage_error():
  result = CliRunner().invoke(main, [])
  assert result.exit_code == 2
  assert "Usage:" in result.output
  assert result.stdout == ""


def test_missing_file_is_skipped(tn_wa_files, tmp_path):
  tn, _ = tn_wa_files
  result = CliRunner().invoke(main, [str(tmp_path / "nope.tdv"), str(tn)])
  assert result.exit_code == 0
  assert result.stdout.startswith("States found: TN\n")


def test_strict_stops_on_missing_file(tn_wa_files, tmp_path):
  tn, _ = tn_wa_files
  result = CliRunner().invoke(main, ["--strict", str(tn), str(tmp_path / "nope.tdv")])
  assert result.exit_code == 1
  assert "ERROR: cannot open" in result.stderr
  assert "States found" not in result.stdout


def test_max_regions_exceeded(tn_wa_files):
  result = CliRunner().invoke(main, ["--max-regions", "1", *map(str, tn_wa_files)])
  assert result.exit_code == 1
  assert "would exceed the limit of 1 regions" in result.stderr


def test_bad_timezone_is_usage_error(tn_wa_files):
  tn, _ = tn_wa_files
  result = CliRunner().invoke(main, ["--tz", "Mars/Olympus_Mons", str(tn)])
  assert result.exit_code == 2


def test_show_pressure_and_zero_invalid(tmp_path):
  path = tmp_path / "p.tdv"
  path.write_text(tdv_line("TN", 1000, K_50F, pressure=101320.0) + tdv_line("TN", 2000, K_50F, pressure="?", humidity=10.0), encoding="utf-8")
  result = CliRunner().invoke(main, ["--show-pressure", "--zero-invalid", str(path)])
  assert result.exit_code == 0
  assert "Number of Records: 2" in result.stdout
  assert "Average Pressure: 506.6hPa" in result.stdout


def test_config_file(tn_wa_files, tmp_path):
  cfg = tmp_path / "cfg.yaml"
  cfg.write_text("missing_files: halt\n", encoding="utf-8")
  tn, _ = tn_wa_files
  result = CliRunner().invoke(main, ["--config", str(cfg), str(tn), str(tmp_path / "nope.tdv")])
  assert result.exit_code == 1



def test_local_timezone(tn_wa_files):
  tn, _ = tn_wa_files
  result = CliRunner().invoke(main, ["--tz", "local", str(tn)])
  assert result.exit_code == 0
  assert result.stdout.startswith("States found: TN\n")
  assert "Number of Records: 3" in result.stdout


def test_malformed_lines_still_exit_zero(tmp_path):
  path = tmp_path / "bad.tdv"
  path.write_text(tdv_line("TN", 1000, K_50F) + tdv_line("TN", 2000, "1e1000000") + "TN\tshort\n", encoding="utf-8")
  result = CliRunner().invoke(main, [str(path)])
  assert result.exit_code == 0
  assert "Number of Records: 1" in result.stdout
