"""Conservation actions a player can apply while a session is running."""

from enum import Enum

from ecosim.config.environment import PARAMETER_RANGES
from ecosim.state import EnvironmentalState

_CO2_FLOOR = PARAMETER_RANGES["co2_levels"][0]
_PERCENT_CEILING = 100.0


class ConservationAction(Enum):
    """Each member carries its display label and impact magnitude."""

    PLANT_TREES = ("Plant Trees", 5)
    ADD_SOLAR = ("Add Solar", 10)
    WIND_POWER = ("Wind Power", 8)

    def __init__(self, label: str, impact: int) -> None:
        self.label = label
        self.impact = impact

    def apply(self, state: EnvironmentalState) -> EnvironmentalState:
        """Return the state after this action."""
        if self is ConservationAction.PLANT_TREES:
            return state.with_changes(
                forest_cover=min(_PERCENT_CEILING, state.forest_cover + self.impact)
            )
        if self is ConservationAction.ADD_SOLAR:
            return state.with_changes(
                renewable_energy=min(_PERCENT_CEILING, state.renewable_energy + self.impact)
            )
        # Wind power also displaces fossil generation
        return state.with_changes(
            renewable_energy=min(_PERCENT_CEILING, state.renewable_energy + self.impact),
            co2_levels=max(_CO2_FLOOR, state.co2_levels - self.impact * 2),
        )
