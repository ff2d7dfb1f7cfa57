"""
Daily automation pipeline.

Once per simulated day the farm runs four phases in a fixed order:

1. Auto-harvest every ready plot.
2. Auto-plant every empty plot, priority produce first.
3. Auto-shop for seeds (priority tier, then cheapest-any tier).
4. Weekly sale of the harvested ledger on the last day of a week.

`apply_daily_automation` works on a copy of a `FarmSnapshot` and returns the
fully updated snapshot with the report lines, so the caller can commit the
whole day in one step.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from .errors import InsufficientSeedStockError
from .grid import PlotGrid
from .resources import SeedInventory, HarvestLedger, CashLedger

logger = logging.getLogger(__name__)


@dataclass
class FarmSnapshot:
    day: int
    plots: PlotGrid
    seeds: SeedInventory
    cash: int
    harvested: HarvestLedger

    def copy(self):
        return FarmSnapshot(
            day=self.day,
            plots=self.plots.copy(),
            seeds=self.seeds.copy(),
            cash=self.cash,
            harvested=self.harvested.copy(),
        )


@dataclass
class AutomationResult:
    snapshot: FarmSnapshot
    report: List[str] = field(default_factory=list)
    harvested: int = 0
    planted: int = 0
    purchased: dict = field(default_factory=dict)
    week_earnings: int = 0
    sold: bool = False

    @property
    def notification(self):
        """All report lines as one message, or None if nothing happened."""
        return "\n".join(self.report) if self.report else None


def auto_harvest(state, catalog, result):
    for plot in state.plots.ready_plots():
        produce = catalog.find(plot.produce_id)
        if produce is None:
            continue
        state.harvested.add(state.plots.harvest(plot.id), 1)
        result.harvested += 1
        result.report.append(f"Auto-harvested {produce.name} from plot {plot.id + 1}.")


def _seed_to_plant(seeds, catalog, priority_id):
    if priority_id in catalog and seeds.quantity(priority_id) > 0:
        return priority_id
    return seeds.first_in_stock()


def auto_plant(state, catalog, config, result):
    priority_id = config["PRIORITY_PRODUCE_ID"]
    for plot in state.plots.empty_plots():
        produce_id = _seed_to_plant(state.seeds, catalog, priority_id)
        if produce_id is None:
            # Out of seeds: the remaining plots stay empty
            break
        produce = catalog.find(produce_id)
        if produce is None:
            continue
        try:
            state.seeds.consume(produce_id, 1)
        except InsufficientSeedStockError:
            continue
        state.plots.plant(plot.id, produce_id, state.day)
        result.planted += 1
        result.report.append(f"Auto-planted {produce.name} on plot {plot.id + 1}.")
    state.seeds.prune()


def _buy(state, produce, batch_size, result):
    quantity = min(state.cash // produce.seed_cost, batch_size)
    if quantity <= 0:
        return False
    wallet = CashLedger(state.cash)
    wallet.withdraw(quantity * produce.seed_cost)
    state.cash = wallet.balance
    state.seeds.add(produce.id, quantity)
    result.purchased[produce.id] = result.purchased.get(produce.id, 0) + quantity
    result.report.append(f"Auto-purchased {quantity} {produce.name} seeds.")
    return True


def auto_shop(state, catalog, config, result):
    priority = catalog.find(config["PRIORITY_PRODUCE_ID"])
    if (priority is not None
            and state.seeds.quantity(priority.id) < config["PRIORITY_THRESHOLD"]
            and state.cash >= priority.seed_cost):
        if _buy(state, priority, config["PRIORITY_BATCH_SIZE"], result):
            return

    if state.seeds.total() >= config["ANY_SEED_THRESHOLD"]:
        return
    cheapest = catalog.cheapest()
    if cheapest is not None and state.cash >= cheapest.seed_cost:
        _buy(state, cheapest, config["CHEAPEST_BATCH_SIZE"], result)


def is_sale_day(day, days_in_week):
    return day > 0 and day % days_in_week == 0


def weekly_sale(state, catalog, config, result):
    days_in_week = config["DAYS_IN_WEEK"]
    if not is_sale_day(state.day, days_in_week):
        return

    if not state.harvested:
        # No "nothing sold" message at the end of the first week
        if state.day > days_in_week:
            result.report.append("Nothing sold this week.")
        return

    summary = ["Weekly Sales:"]
    for produce_id, quantity in state.harvested.items():
        produce = catalog.find(produce_id)
        if produce is None:
            continue
        earnings = quantity * produce.sell_price
        result.week_earnings += earnings
        summary.append(f"{produce.name} x{quantity}: ${earnings}")
    summary.append(f"Total: ${result.week_earnings}")

    state.cash += result.week_earnings
    state.harvested.clear()
    result.sold = True
    result.report.append("\n".join(summary))


def apply_daily_automation(snapshot, catalog, config):
    """
    Run harvest -> plant -> shop -> weekly sale against a copy of `snapshot`.
    The input snapshot is left untouched.
    """
    state = snapshot.copy()
    result = AutomationResult(snapshot=state)

    auto_harvest(state, catalog, result)
    auto_plant(state, catalog, config, result)
    auto_shop(state, catalog, config, result)
    weekly_sale(state, catalog, config, result)

    logger.debug(
        "Day %d automation: %d harvested, %d planted, bought %s, earned %d",
        state.day, result.harvested, result.planted, result.purchased, result.week_earnings,
    )
    return result
