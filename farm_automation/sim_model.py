"""
Core simulation logic.
"""
import logging

import simpy

from .automation import FarmSnapshot, apply_daily_automation
from .clock import SimulationClock
from .config import build_config
from .errors import InsufficientFundsError, UnknownProduceError
from .grid import PlotGrid
from .notifications import NotificationSink
from .resources import SeedInventory, HarvestLedger, CashLedger

logger = logging.getLogger(__name__)


class FarmSimulation:
    """
    One farming session. Owns the clock, plots, seed and harvest ledgers,
    cash and notifications; every mutation goes through the clock's day
    rollover or `buy_seed`.

    Time on `env` is measured in real-time milliseconds. Pass a
    `simpy.rt.RealtimeEnvironment` to pace the session against the wall clock.
    """
    def __init__(self, config_scenario=None, env=None):
        self.config = build_config(config_scenario)
        self.env = env if env is not None else simpy.Environment()
        self.catalog = self.config["CATALOG"]

        self.clock = SimulationClock(
            hours_in_day=self.config["HOURS_IN_DAY"],
            days_in_week=self.config["DAYS_IN_WEEK"],
        )
        self.grid = PlotGrid(self.config["PLOT_COUNT"])
        self.seeds = SeedInventory(self.config["INITIAL_SEEDS"])
        self.harvested = HarvestLedger()
        self.wallet = CashLedger(self.config["INITIAL_CASH"])
        self.notifications = NotificationSink(self.env, ttl=self.config["NOTIFICATION_TTL_MS"])

        # Stats
        self.automation_runs = 0
        self.total_earnings = 0
        self.last_result = None
        self._day_observers = []
        self._clock_process = None

        self.clock.subscribe_day_rollover(self._on_new_day)

    def log(self, message):
        logger.debug(f"[{self.env.now:.0f}] {message}")

    # ---- Read models ----

    @property
    def cash(self):
        return self.wallet.balance

    @property
    def game_day(self):
        return self.clock.game_day

    @property
    def game_hour(self):
        return self.clock.game_hour

    @property
    def week(self):
        return self.clock.week

    @property
    def plots(self):
        return list(self.grid)

    @property
    def seed_inventory(self):
        return self.seeds.items()

    @property
    def harvested_produce(self):
        return self.harvested.items()

    @property
    def notification(self):
        return self.notifications.current

    def find_produce(self, produce_id):
        return self.catalog.find(produce_id)

    def snapshot(self):
        """Consistent copy of everything the daily automation reads."""
        return FarmSnapshot(
            day=self.clock.game_day,
            plots=self.grid,
            seeds=self.seeds,
            cash=self.wallet.balance,
            harvested=self.harvested,
        ).copy()

    def subscribe_day(self, callback):
        """Call `callback(sim, result)` after each committed day."""
        self._day_observers.append(callback)

    # ---- Time ----

    def start(self):
        """Register the clock's tick process on the environment (once)."""
        if self._clock_process is None:
            self._clock_process = self.env.process(
                self.clock.run(self.env, self.config["TICK_INTERVAL_MS"])
            )
        return self._clock_process

    def run(self, until):
        self.start()
        self.env.run(until=until)

    def run_until_day(self, day):
        """Run the environment until day `day` has been reached and automated."""
        if day <= self.clock.game_day:
            return
        self.start()
        reached = self.env.event()

        def watch(sim, result):
            if sim.game_day >= day and not reached.triggered:
                reached.succeed(day)

        self._day_observers.append(watch)
        try:
            self.env.run(until=reached)
        finally:
            self._day_observers.remove(watch)

    def run_days(self, days):
        self.run_until_day(self.clock.game_day + days)

    def tick(self):
        return self.clock.tick()

    def advance_hours(self, hours):
        for _ in range(hours):
            self.clock.tick()

    def advance_days(self, days):
        """Tick straight through `days` rollovers without touching the environment."""
        for _ in range(days):
            while not self.clock.tick():
                pass

    # ---- Daily automation ----

    def _on_new_day(self, day):
        ripened = self.grid.check_ready(day, self.catalog)
        if ripened:
            self.log(f"Day {day}: plots {[p.id for p in ripened]} ready for harvest.")
        if self.clock.game_hour == 0:
            self.run_daily_automation()

    def run_daily_automation(self):
        result = apply_daily_automation(self.snapshot(), self.catalog, self.config)
        self._commit(result)
        return result

    def _commit(self, result):
        state = result.snapshot
        for plot, updated in zip(self.grid, state.plots):
            plot.planting = updated.planting
        self.seeds = state.seeds
        self.harvested = state.harvested
        self.wallet.balance = state.cash
        self.automation_runs += 1
        self.total_earnings += result.week_earnings
        self.last_result = result

        if result.notification:
            self.notifications.push(result.notification)
        self.log(f"Day {state.day} committed: cash ${state.cash}.")
        for callback in list(self._day_observers):
            callback(self, result)

    # ---- Commands ----

    def buy_seed(self, produce_id, quantity=1):
        """
        Manual purchase from the seed shop. Returns True if the seeds were bought.
        Unknown produce is ignored; a short wallet leaves everything unchanged.
        """
        try:
            produce = self.catalog.require(produce_id)
        except UnknownProduceError as exc:
            self.log(f"Ignoring purchase: {exc}")
            return False
        quantity = max(1, int(quantity))

        cost = produce.seed_cost * quantity
        try:
            self.wallet.withdraw(cost)
        except InsufficientFundsError:
            self.notifications.push("Not enough cash!")
            return False
        self.seeds.add(produce_id, quantity)
        self.notifications.push(f"Bought {quantity} {produce.name} seed(s).")
        return True

    def schedule_purchase(self, delay, produce_id, quantity=1):
        """Queue a manual purchase on the environment, `delay` time units from now."""
        def purchase():
            yield self.env.timeout(delay)
            return self.buy_seed(produce_id, quantity)
        return self.env.process(purchase())

    def __repr__(self):
        return f"FarmSimulation({self.clock}, cash=${self.cash})"
