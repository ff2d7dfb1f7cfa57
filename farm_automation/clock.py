"""
Simulated calendar: game hours and days advanced by a periodic tick.
"""
import logging

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Two counters, hour and day. Every tick advances the hour; wrapping past
    the last hour of the day starts a new day and notifies the day-rollover
    listeners with the new day number, in the order they subscribed.
    """
    def __init__(self, hours_in_day=24, days_in_week=7, game_day=1, game_hour=0):
        if not 0 <= game_hour < hours_in_day:
            raise ValueError(f"game_hour must be in [0, {hours_in_day}), got {game_hour}")
        if game_day < 1:
            raise ValueError(f"game_day must be >= 1, got {game_day}")
        self.hours_in_day = hours_in_day
        self.days_in_week = days_in_week
        self.game_day = game_day
        self.game_hour = game_hour
        self.ticks = 0
        self._day_listeners = []

    def subscribe_day_rollover(self, callback):
        self._day_listeners.append(callback)

    def tick(self):
        """Advance one game hour. Returns True when a new day started."""
        self.ticks += 1
        self.game_hour += 1
        if self.game_hour < self.hours_in_day:
            return False
        self.game_hour = 0
        self.game_day += 1
        logger.debug("Day rollover: day %d begins", self.game_day)
        for callback in list(self._day_listeners):
            callback(self.game_day)
        return True

    def run(self, env, interval):
        """SimPy process: tick every `interval` time units, forever."""
        while True:
            yield env.timeout(interval)
            self.tick()

    @property
    def week(self):
        return (self.game_day - 1) // self.days_in_week + 1

    @property
    def day_of_week(self):
        return (self.game_day - 1) % self.days_in_week + 1

    @property
    def day_progress(self):
        """Fraction of the current day already elapsed, in [0, 1)."""
        return self.game_hour / self.hours_in_day

    @property
    def hour_label(self):
        return f"{self.game_hour:02d}:00"

    def __repr__(self):
        return f"Clock(week {self.week}, day {self.game_day}, {self.hour_label})"
