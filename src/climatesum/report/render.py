"""Plain-text summary report.

Layout follows the NOAA climate analysis report: a one-line list of the
regions followed by one block per region. Dates are printed like C's
ctime() in the C locale, in a fixed time zone (UTC unless told otherwise)
so the same input always gives the same report.
"""
from datetime import datetime, timezone, tzinfo
from typing import List, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

from ..runtime.store import AccumulatorStore, RegionAccumulator

logger = logging.getLogger(__name__)

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

TEMPERATURE_UNIT = "F"


def resolve_timezone(name: Union[str, tzinfo, None]) -> tzinfo:
    """Turn a zone name into a tzinfo.

    "UTC" (the default) needs no tz database. "local" uses the zone of the
    machine running the report, which is what the C tool did.

    Raises:
        ValueError: If the name is not a known IANA zone
    """
    if isinstance(name, tzinfo):
        return name
    if name is None or name.upper() in ("UTC", "Z"):
        return timezone.utc
    if name.lower() == "local":
        return datetime.now().astimezone().tzinfo
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"unknown time zone: {name!r}") from e


def format_ctime(ts: int, tz: Union[str, tzinfo, None] = "UTC") -> str:
    """Format epoch seconds as 'Mon Aug  3 11:00:00 2015'."""
    zone = resolve_timezone(tz)
    try:
        dt = datetime.fromtimestamp(ts, tz=zone)
    except (OverflowError, OSError, ValueError):
        logger.warning(f"Timestamp {ts} is outside the supported date range")
        return f"@{ts}"
    return (
        f"{DAY_NAMES[dt.weekday()]} {MONTH_NAMES[dt.month - 1]} {dt.day:2d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} {dt.year}"
    )


def render_region(
    acc: RegionAccumulator,
    tz: Union[str, tzinfo, None] = "UTC",
    show_pressure: bool = False,
) -> List[str]:
    """Report lines for one region."""
    lines = [
        f"-- State: {acc.region} --",
        f"Number of Records: {acc.count}",
        f"Average Humidity: {acc.average_humidity:.1f}%",
        f"Average Temperature: {acc.average_temperature:.1f}{TEMPERATURE_UNIT}",
        f"Max Temperature: {acc.max_temperature:.1f}{TEMPERATURE_UNIT}",
        f"Max Temperature on: {format_ctime(acc.max_temperature_at, tz)}",
        f"Min Temperature: {acc.min_temperature:.1f}{TEMPERATURE_UNIT}",
        f"Min Temperature on: {format_ctime(acc.min_temperature_at, tz)}",
        f"Lightning Strikes: {acc.lightning_sum:.0f}",
        f"Records with Snow Cover: {acc.snow_sum:.0f}",
        f"Average Cloud Cover: {acc.average_cloud_cover:.1f}%",
    ]
    if show_pressure:
        # Pa -> hPa
        lines.append(f"Average Pressure: {acc.average_pressure / 100:.1f}hPa")
    return lines


def render(
    store: AccumulatorStore,
    tz: Union[str, tzinfo, None] = "UTC",
    show_pressure: bool = False,
) -> str:
    """Render the whole store as report text, regions in first-seen order."""
    zone = resolve_timezone(tz)
    lines = ["States found: " + " ".join(store.regions())]
    for acc in store:
        lines.extend(render_region(acc, zone, show_pressure))
    return "\n".join(lines).rstrip() + "\n"
