"""
Entities living on the farm.
"""
import enum
from dataclasses import dataclass
from typing import Optional


class PlotState(enum.Enum):
    EMPTY = "EMPTY"
    GROWING = "GROWING"
    READY_FOR_HARVEST = "READY_FOR_HARVEST"


@dataclass(frozen=True)
class Planting:
    """What is in the ground. Only exists while a plot is not empty."""
    produce_id: str
    planted_at_day: int
    ready: bool = False


class Plot:
    def __init__(self, id, planting=None):
        self.id = id
        self.planting: Optional[Planting] = planting

    @property
    def state(self):
        if self.planting is None:
            return PlotState.EMPTY
        if self.planting.ready:
            return PlotState.READY_FOR_HARVEST
        return PlotState.GROWING

    @property
    def produce_id(self):
        return self.planting.produce_id if self.planting else None

    @property
    def planted_at_day(self):
        return self.planting.planted_at_day if self.planting else None

    def reset(self):
        """Back to the empty defaults, keeping the plot's identity."""
        self.planting = None

    def copy(self):
        return Plot(self.id, self.planting)

    def growth_progress(self, game_day, catalog):
        """Percent grown (0-100) for a growing plot, 0 otherwise."""
        if self.state is not PlotState.GROWING:
            return 0.0
        produce = catalog.find(self.produce_id)
        if produce is None:
            return 0.0
        days_elapsed = max(0, game_day - self.planted_at_day)
        return min(100.0, days_elapsed / produce.growth_time_in_days * 100)

    def days_grown(self, game_day):
        """Day counter shown on a growing plot: 1 on the planting day."""
        if self.planting is None:
            return 0
        elapsed = game_day - self.planted_at_day
        return max(1, elapsed + (0 if elapsed == 0 else 1))

    def __eq__(self, other):
        if not isinstance(other, Plot):
            return NotImplemented
        return self.id == other.id and self.planting == other.planting

    def __repr__(self):
        if self.planting is None:
            return f"Plot_{self.id}(EMPTY)"
        return f"Plot_{self.id}({self.state.value} {self.produce_id}@{self.planted_at_day})"
