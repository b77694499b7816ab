"""Value types for the environmental parameter vector and derived metrics.

Both types are frozen dataclasses: a parameter change produces a new
EnvironmentalState and the metrics engine produces a new EcosystemMetrics,
so nothing downstream can observe a half-updated value.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping

from ecosim.config.environment import (
    DEFAULT_CO2_LEVELS,
    DEFAULT_FOREST_COVER,
    DEFAULT_INDUSTRY_LEVEL,
    DEFAULT_POPULATION,
    DEFAULT_RENEWABLE_ENERGY,
    DEFAULT_TEMPERATURE,
    INITIAL_AIR_QUALITY,
    INITIAL_BIODIVERSITY_INDEX,
    INITIAL_CARBON_STORAGE,
    INITIAL_SPECIES_COUNT,
    INITIAL_SUSTAINABILITY_SCORE,
    PARAMETER_RANGES,
)
from ecosim.exceptions import UnknownParameterError
from ecosim.math_utils import clamp

# Keys used by the web client and the persistence layer
_CAMEL_CASE = {
    "co2_levels": "co2Levels",
    "forest_cover": "forestCover",
    "temperature": "temperature",
    "renewable_energy": "renewableEnergy",
    "population": "population",
    "industry_level": "industryLevel",
    "species_count": "speciesCount",
    "air_quality": "airQuality",
    "carbon_storage": "carbonStorage",
    "biodiversity_index": "biodiversityIndex",
    "sustainability_score": "sustainabilityScore",
}
_SNAKE_CASE = {camel: snake for snake, camel in _CAMEL_CASE.items()}


def normalize_parameter_name(name: str) -> str:
    """Map a snake_case or camelCase parameter name to its field name.

    Raises:
        UnknownParameterError: If ``name`` is not an environmental parameter
    """
    field_name = _SNAKE_CASE.get(name, name)
    if field_name not in PARAMETER_RANGES:
        raise UnknownParameterError(name)
    return field_name


class AirQuality(str, Enum):
    """Air quality bands, ordered from cleanest to dirtiest."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    MODERATE = "Moderate"
    POOR = "Poor"


@dataclass(frozen=True)
class EnvironmentalState:
    """The six-parameter input vector describing ecological conditions.

    Attributes:
        co2_levels: Atmospheric CO2 in ppm, domain [350, 500]
        forest_cover: Percent forest cover, domain [0, 100]
        temperature: Degrees above baseline, domain [-2, 5]
        renewable_energy: Percent renewable share, domain [0, 100]
        population: Percent population density, domain [0, 100]. Accepted
            and carried along but not used by any metric.
        industry_level: Percent industrial activity, domain [0, 100]
    """

    co2_levels: float = DEFAULT_CO2_LEVELS
    forest_cover: float = DEFAULT_FOREST_COVER
    temperature: float = DEFAULT_TEMPERATURE
    renewable_energy: float = DEFAULT_RENEWABLE_ENERGY
    population: float = DEFAULT_POPULATION
    industry_level: float = DEFAULT_INDUSTRY_LEVEL

    def with_changes(self, **changes: float) -> "EnvironmentalState":
        """Return a new state with the given fields replaced."""
        return replace(self, **changes)

    def clamped(self) -> "EnvironmentalState":
        """Return a copy with every parameter clamped to its domain."""
        values = {}
        for f in fields(self):
            lower, upper, _step = PARAMETER_RANGES[f.name]
            values[f.name] = clamp(float(getattr(self, f.name)), lower, upper)
        return EnvironmentalState(**values)

    def to_dict(self) -> Dict[str, float]:
        return {_CAMEL_CASE[key]: value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvironmentalState":
        """Build a state from snake_case or camelCase keys; missing keys use defaults."""
        values = {normalize_parameter_name(key): float(value) for key, value in data.items()}
        return cls(**values)


@dataclass(frozen=True)
class EcosystemMetrics:
    """Derived scorecard recomputed wholesale from an EnvironmentalState."""

    species_count: int
    air_quality: AirQuality
    carbon_storage: float
    biodiversity_index: int
    sustainability_score: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["air_quality"] = self.air_quality.value
        return {_CAMEL_CASE[key]: value for key, value in data.items()}


# Placeholder scorecard displayed before the first computation. Deliberately
# not derived from the default state.
INITIAL_DISPLAY_METRICS = EcosystemMetrics(
    species_count=INITIAL_SPECIES_COUNT,
    air_quality=AirQuality(INITIAL_AIR_QUALITY),
    carbon_storage=INITIAL_CARBON_STORAGE,
    biodiversity_index=INITIAL_BIODIVERSITY_INDEX,
    sustainability_score=INITIAL_SUSTAINABILITY_SCORE,
)
