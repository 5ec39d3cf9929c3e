import pytest

# Kelvin readings that land on round Fahrenheit values
K_40F = "277.5944444444"
K_50F = "283.15"
K_60F = "288.7055555556"
K_70F = "294.2611111111"


def tdv_line(region, ts_ms, kelvin, humidity=50.0, snow=0, cloud=50.0, lightning=0, pressure=101325.0, geohash="dn4xzk3yc80b"):
  fields = [region, str(ts_ms), geohash, str(humidity), str(snow), str(cloud), str(lightning), str(pressure), str(kelvin)]
  return "\t".join(fields) + "\n"


@pytest.fixture
def make_line():
  return tdv_line


@pytest.fixture
def tn_wa_files(tmp_path):
  tn = tmp_path / "data_tn.tdv"
  tn.write_text(
    tdv_line("TN", 1424404800000, K_50F, humidity=40.0, cloud=10.0)
    + tdv_line("TN", 1430308800000, K_60F, humidity=50.0, cloud=50.0, snow=1)
    + tdv_line("TN", 1438599600000, K_70F, humidity=60.0, cloud=90.0, lightning=1),
    encoding="utf-8",
  )
  wa = tmp_path / "data_wa.tdv"
  wa.write_text(tdv_line("WA", 1451448000000, K_40F, humidity=88.0, cloud=100.0, snow=1), encoding="utf-8")
  return tn, wa
