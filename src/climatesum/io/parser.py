import math
from decimal import ROUND_DOWN, Decimal, DecimalException
from typing import Iterable, Iterator, Tuple, Union

from ..core.units import MAX_TIMESTAMP, MIN_TIMESTAMP, kelvin_to_fahrenheit, millis_to_seconds
from ..errors import FieldCountMismatch, MissingRegionCode, NumericFieldInvalid, ParseError
from ..model.observation import Observation

# region, timestamp_ms, geohash, humidity, snow, cloud_cover, lightning, pressure, temp_K
FIELD_COUNT = 9

INVALID_NUMBER_POLICIES = ("skip", "zero")


def _number(name: str, raw: str, line: str, invalid_numbers: str) -> float:
  try:
    value = float(raw)
  except ValueError:
    value = math.nan
  if math.isfinite(value):
    return value
  if invalid_numbers == "zero":
    return 0.0
  raise NumericFieldInvalid(name, raw, line)


def _timestamp(raw: str, line: str, invalid_numbers: str) -> int:
  try:
    millis = Decimal(raw.strip())
  except DecimalException:
    millis = Decimal("NaN")
  # bounds checked in decimal so huge exponents never become huge ints
  if not millis.is_finite() or not (MIN_TIMESTAMP * 1000 <= millis < (MAX_TIMESTAMP + 1) * 1000):
    if invalid_numbers == "zero":
      return 0
    raise NumericFieldInvalid("timestamp", raw, line)
  return millis_to_seconds(int(millis.to_integral_value(rounding=ROUND_DOWN)))


def _temperature(raw: str, line: str, invalid_numbers: str) -> float:
  try:
    return kelvin_to_fahrenheit(raw)
  except ValueError:
    if invalid_numbers == "zero":
      return kelvin_to_fahrenheit(0)
    raise NumericFieldInvalid("temperature", raw, line) from None


def parse_line(line: str, invalid_numbers: str = "skip") -> Observation:
  """
  Turn one TDV line into an Observation.

  Raises a ParseError subclass for short lines, an empty region code or,
  with invalid_numbers="skip", a numeric field that is not a finite number.
  With invalid_numbers="zero" such fields read as 0 instead. Fields past
  the ninth are ignored.
  """
  if invalid_numbers not in INVALID_NUMBER_POLICIES:
    raise ValueError(f"unknown invalid_numbers policy: {invalid_numbers!r}")
  text = line.rstrip("\r\n")
  fields = text.split("\t")
  if len(fields) < FIELD_COUNT:
    raise FieldCountMismatch(len(fields), FIELD_COUNT, text)
  region = fields[0].strip()
  if not region:
    raise MissingRegionCode(text)
  return Observation(
    region=region,
    timestamp=_timestamp(fields[1], text, invalid_numbers),
    humidity=_number("humidity", fields[3], text, invalid_numbers),
    snow=_number("snow", fields[4], text, invalid_numbers),
    cloud_cover=_number("cloud_cover", fields[5], text, invalid_numbers),
    lightning=_number("lightning", fields[6], text, invalid_numbers),
    pressure=_number("pressure", fields[7], text, invalid_numbers),
    temperature=_temperature(fields[8], text, invalid_numbers),
  )


def iter_observations(
  lines: Iterable[str], invalid_numbers: str = "skip"
) -> Iterator[Tuple[int, Union[Observation, ParseError]]]:
  """
  Yield (line_number, Observation or ParseError) for every non-blank line.
  """
  for lineno, line in enumerate(lines, start=1):
    if not line.strip():
      continue
    try:
      yield lineno, parse_line(line, invalid_numbers)
    except ParseError as e:
      yield lineno, e
