"""Running per-region aggregates.

One RegionAccumulator per region code, folded observation by observation.
The store keeps regions in the order they were first seen so reports are
reproducible across runs.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
import logging

from ..errors import CapacityExceededError
from ..model.observation import Observation

logger = logging.getLogger(__name__)


@dataclass
class RegionAccumulator:
    """Running statistics for a single region."""
    region: str
    count: int
    temperature_sum: float
    humidity_sum: float
    cloud_cover_sum: float
    snow_sum: float
    lightning_sum: float
    pressure_sum: float
    max_temperature: float
    max_temperature_at: int
    min_temperature: float
    min_temperature_at: int

    @classmethod
    def from_observation(cls, obs: Observation) -> "RegionAccumulator":
        """Start a new accumulator seeded with its first observation."""
        return cls(
            region=obs.region,
            count=1,
            temperature_sum=obs.temperature,
            humidity_sum=obs.humidity,
            cloud_cover_sum=obs.cloud_cover,
            snow_sum=obs.snow,
            lightning_sum=obs.lightning,
            pressure_sum=obs.pressure,
            max_temperature=obs.temperature,
            max_temperature_at=obs.timestamp,
            min_temperature=obs.temperature,
            min_temperature_at=obs.timestamp,
        )

    def fold(self, obs: Observation) -> None:
        """Add one observation for this region.

        Ties on the extrema go to the newer observation.
        """
        if obs.region != self.region:
            raise ValueError(
                f"observation for {obs.region!r} folded into {self.region!r}"
            )
        self.count += 1
        self.temperature_sum += obs.temperature
        self.humidity_sum += obs.humidity
        self.cloud_cover_sum += obs.cloud_cover
        self.snow_sum += obs.snow
        self.lightning_sum += obs.lightning
        self.pressure_sum += obs.pressure

        if obs.temperature >= self.max_temperature:
            self.max_temperature = obs.temperature
            self.max_temperature_at = obs.timestamp
        if obs.temperature <= self.min_temperature:
            self.min_temperature = obs.temperature
            self.min_temperature_at = obs.timestamp

    @property
    def average_temperature(self) -> float:
        return self.temperature_sum / self.count

    @property
    def average_humidity(self) -> float:
        return self.humidity_sum / self.count

    @property
    def average_cloud_cover(self) -> float:
        return self.cloud_cover_sum / self.count

    @property
    def average_pressure(self) -> float:
        return self.pressure_sum / self.count


class AccumulatorStore:
    """Region code -> RegionAccumulator, iterated in first-seen order."""

    def __init__(self, max_regions: Optional[int] = None):
        """Initialize an empty store.

        Args:
            max_regions: Optional limit on distinct regions. None means unbounded.
        """
        if max_regions is not None and max_regions < 1:
            raise ValueError("max_regions must be at least 1")
        self._regions: Dict[str, RegionAccumulator] = {}
        self._max_regions = max_regions

    @property
    def max_regions(self) -> Optional[int]:
        return self._max_regions

    def fold(self, obs: Observation) -> RegionAccumulator:
        """Fold an observation into the accumulator for its region.

        Args:
            obs: Parsed observation

        Returns:
            The accumulator that was created or updated

        Raises:
            CapacityExceededError: If obs starts a new region beyond max_regions
        """
        acc = self._regions.get(obs.region)
        if acc is not None:
            acc.fold(obs)
            return acc

        if self._max_regions is not None and len(self._regions) >= self._max_regions:
            raise CapacityExceededError(obs.region, self._max_regions)

        acc = RegionAccumulator.from_observation(obs)
        self._regions[obs.region] = acc
        logger.debug(f"New region {obs.region} (#{len(self._regions)})")
        return acc

    def get(self, region: str) -> Optional[RegionAccumulator]:
        return self._regions.get(region)

    def regions(self) -> List[str]:
        """Region codes in first-seen order."""
        return list(self._regions)

    def total_records(self) -> int:
        return sum(acc.count for acc in self._regions.values())

    def __contains__(self, region: object) -> bool:
        return region in self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[RegionAccumulator]:
        return iter(list(self._regions.values()))
