import unittest

import simpy.rt

from farm_automation.sim_model import FarmSimulation
from farm_automation.config import SCENARIO_A
from farm_automation.entities import PlotState


class TestSimulationFlow(unittest.TestCase):
    def setUp(self):
        self.sim = FarmSimulation(SCENARIO_A.copy())

    def test_initial_state(self):
        self.assertEqual(self.sim.cash, 100)
        self.assertEqual((self.sim.game_day, self.sim.game_hour, self.sim.week), (1, 0, 1))
        self.assertEqual(self.sim.seed_inventory, [("tomato", 5), ("strawberry", 3)])
        self.assertEqual(len(self.sim.plots), 9)
        self.assertTrue(all(p.state is PlotState.EMPTY for p in self.sim.plots))
        self.assertIsNone(self.sim.notification)

    def test_first_day_rollover(self):
        """Day 2: strawberries planted first, then tomatoes; the shop restocks strawberries."""
        self.sim.advance_hours(24)
        self.assertEqual((self.sim.game_day, self.sim.game_hour), (2, 0))
        self.assertEqual(
            [p.produce_id for p in self.sim.plots],
            ["strawberry"] * 3 + ["tomato"] * 5 + [None],
        )
        self.assertTrue(all(p.planted_at_day == 2 for p in self.sim.plots[:8]))
        self.assertIs(self.sim.plots[8].state, PlotState.EMPTY)
        # Strawberry stock hit 0 < 3, so tier A buys 5 and tier B is skipped
        self.assertEqual(self.sim.seed_inventory, [("strawberry", 5)])
        self.assertEqual(self.sim.cash, 50)
        lines = self.sim.notification.split("\n")
        self.assertEqual(lines[0], "Auto-planted Strawberry on plot 1.")
        self.assertEqual(lines[3], "Auto-planted Tomato on plot 4.")
        self.assertEqual(lines[-1], "Auto-purchased 5 Strawberry seeds.")
        self.assertEqual(len(lines), 9)

    def test_first_week(self):
        self.sim.advance_days(2)  # day 3
        self.assertEqual(self.sim.plots[8].planting.produce_id, "strawberry")
        self.assertEqual(self.sim.seed_inventory, [("strawberry", 4)])
        self.assertEqual(self.sim.cash, 50)

        self.sim.advance_days(1)  # day 4: first strawberries come in
        self.assertEqual(self.sim.harvested_produce, [("strawberry", 3)])
        self.assertEqual(self.sim.cash, 0)
        self.assertEqual(self.sim.seed_inventory, [("strawberry", 6)])

        self.sim.advance_days(1)  # day 5: tomatoes and the day-3 strawberry
        self.assertEqual(self.sim.harvested_produce, [("strawberry", 4), ("tomato", 5)])
        self.assertEqual(self.sim.seed_inventory, [])
        self.assertTrue(all(p.produce_id == "strawberry" for p in self.sim.plots))

        self.sim.advance_days(2)  # day 7: sale day
        self.assertEqual(self.sim.game_day, 7)
        self.assertEqual(self.sim.cash, 400)
        self.assertEqual(self.sim.harvested_produce, [])
        self.assertEqual(self.sim.total_earnings, 400)
        self.assertIn("Weekly Sales:\nStrawberry x13: $325\nTomato x5: $75\nTotal: $400",
                      self.sim.notification)
        self.assertTrue(all(p.state is PlotState.EMPTY for p in self.sim.plots))

        self.sim.advance_days(1)  # day 8: empty plots, nothing to plant, restock
        self.assertEqual(self.sim.cash, 350)
        self.assertEqual(self.sim.seed_inventory, [("strawberry", 5)])
        self.assertEqual(self.sim.week, 2)

    def test_automation_runs_once_per_rollover(self):
        self.sim.advance_hours(23)
        self.assertEqual(self.sim.automation_runs, 0)
        self.sim.tick()
        self.assertEqual(self.sim.automation_runs, 1)
        self.sim.advance_hours(23)
        self.assertEqual(self.sim.automation_runs, 1)
        self.sim.advance_hours(24 * 3)
        self.assertEqual(self.sim.automation_runs, 4)

    def test_readiness_checked_before_automation(self):
        """A crop ripening at rollover is harvested by that same day's automation."""
        self.sim.advance_days(3)  # day 4
        self.assertEqual(self.sim.last_result.harvested, 3)
        self.assertFalse(any(p.state is PlotState.READY_FOR_HARVEST for p in self.sim.plots))

    def test_nothing_sold_after_first_week(self):
        sim = FarmSimulation({"INITIAL_CASH": 0, "INITIAL_SEEDS": ()})
        sim.advance_days(6)  # day 7
        self.assertIsNone(sim.notification)
        sim.advance_days(7)  # day 14
        self.assertEqual(sim.notification, "Nothing sold this week.")
        self.assertEqual(sim.cash, 0)

    def test_day_observers_see_committed_state(self):
        seen = []
        self.sim.subscribe_day(lambda sim, result: seen.append((result.snapshot.day, sim.cash)))
        self.sim.advance_days(2)
        self.assertEqual(seen, [(2, 50), (3, 50)])

    def test_environment_drives_clock(self):
        """Run on the SimPy environment: one game hour per 200 ms tick."""
        self.sim.run_days(1)
        self.assertEqual(self.sim.env.now, 24 * 200)
        self.assertEqual(self.sim.game_day, 2)
        self.assertEqual(self.sim.automation_runs, 1)
        self.sim.run(until=self.sim.env.now + 5 * 200 + 1)
        self.assertEqual(self.sim.game_hour, 5)

    def test_tick_interval_is_configurable(self):
        sim = FarmSimulation({"TICK_INTERVAL_MS": 50, "HOURS_IN_DAY": 10})
        sim.run_days(2)
        self.assertEqual(sim.env.now, 2 * 10 * 50)
        self.assertEqual(sim.game_day, 3)

    def test_realtime_environment(self):
        env = simpy.rt.RealtimeEnvironment(factor=0.00001, strict=False)
        sim = FarmSimulation(SCENARIO_A.copy(), env=env)
        sim.run_days(1)
        self.assertEqual(sim.game_day, 2)
        self.assertEqual(sim.cash, 50)


if __name__ == '__main__':
    unittest.main()
