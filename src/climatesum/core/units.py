import math
from datetime import datetime, timezone
from decimal import Decimal, DecimalException
from typing import Union

Number = Union[str, int, float, Decimal]

ABSOLUTE_ZERO_C = Decimal("273.15")

# Seconds range datetime can represent: years 1 through 9999
MIN_TIMESTAMP = int(datetime(1, 1, 2, tzinfo=timezone.utc).timestamp())
MAX_TIMESTAMP = int(datetime(9999, 12, 30, tzinfo=timezone.utc).timestamp())


def _as_decimal(value: Number) -> Decimal:
  if isinstance(value, Decimal):
    return value
  # str() first so that 283.15 stays 283.15 instead of its binary expansion
  return Decimal(str(value).strip())


def kelvin_to_fahrenheit(kelvin: Number) -> float:
  """
  F = (K - 273.15) * 9/5 + 32, evaluated in decimal so 273.15 -> 32.0 exactly.
  """
  try:
    k = _as_decimal(kelvin)
    if not k.is_finite():
      raise ValueError(f"not a finite temperature: {kelvin!r}")
    fahrenheit = float((k - ABSOLUTE_ZERO_C) * 9 / 5 + 32)
  except DecimalException:
    raise ValueError(f"not a number: {kelvin!r}") from None
  if not math.isfinite(fahrenheit):
    raise ValueError(f"temperature out of range: {kelvin!r}")
  return fahrenheit


def millis_to_seconds(millis: int) -> int:
  """
  Integer division by 1000, truncating toward zero: -1500 ms -> -1 s.
  """
  seconds = abs(millis) // 1000
  return seconds if millis >= 0 else -seconds
