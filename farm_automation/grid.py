"""
The fixed grid of farm plots.
"""
from dataclasses import replace

from .entities import Plot, Planting, PlotState
from .errors import InvalidPlotStateError


class PlotGrid:
    """
    Fixed-size collection of plots, ids 0..N-1.
    Plots are never added or removed after construction; harvesting resets them in place.
    """
    def __init__(self, plot_count=None, plots=None):
        if plots is not None:
            self.plots = list(plots)
        else:
            self.plots = [Plot(i) for i in range(plot_count)]

    def __len__(self):
        return len(self.plots)

    def __iter__(self):
        return iter(self.plots)

    def __getitem__(self, plot_id):
        return self.plots[plot_id]

    def plant(self, plot_id, produce_id, day):
        plot = self.plots[plot_id]
        if plot.state is not PlotState.EMPTY:
            raise InvalidPlotStateError(plot_id, plot.state.value, "plant")
        plot.planting = Planting(produce_id, day)
        return plot

    def check_ready(self, day, catalog):
        """Mark every plot whose growth time has elapsed by `day` as ready. Returns the changed plots."""
        ripened = []
        for plot in self.plots:
            if plot.state is not PlotState.GROWING:
                continue
            produce = catalog.find(plot.produce_id)
            if produce is None:
                continue
            if day - plot.planted_at_day >= produce.growth_time_in_days:
                plot.planting = replace(plot.planting, ready=True)
                ripened.append(plot)
        return ripened

    def harvest(self, plot_id):
        """Collect the single unit growing on a ready plot and return its produce id."""
        plot = self.plots[plot_id]
        if plot.state is not PlotState.READY_FOR_HARVEST:
            raise InvalidPlotStateError(plot_id, plot.state.value, "harvest")
        produce_id = plot.produce_id
        plot.reset()
        return produce_id

    def empty_plots(self):
        return [p for p in self.plots if p.state is PlotState.EMPTY]

    def ready_plots(self):
        return [p for p in self.plots if p.state is PlotState.READY_FOR_HARVEST]

    def count(self, state):
        return sum(1 for p in self.plots if p.state is state)

    def copy(self):
        return PlotGrid(plots=[p.copy() for p in self.plots])
