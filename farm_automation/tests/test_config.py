import unittest

from farm_automation.catalog import Catalog, ProduceType, DEFAULT_CATALOG, find_produce
from farm_automation.config import build_config, SCENARIO_A, SCENARIO_B
from farm_automation.errors import UnknownProduceError
from farm_automation.sim_model import FarmSimulation


class TestCatalog(unittest.TestCase):
    def test_default_entries(self):
        self.assertEqual([p.id for p in DEFAULT_CATALOG],
                         ["tomato", "strawberry", "carrot", "corn", "potato", "wheat"])
        strawberry = find_produce("strawberry")
        self.assertEqual((strawberry.seed_cost, strawberry.sell_price, strawberry.growth_time_in_days), (10, 25, 2))
        self.assertEqual(DEFAULT_CATALOG.cheapest().id, "carrot")

    def test_missing_entries(self):
        self.assertIsNone(find_produce("banana"))
        self.assertIsNone(find_produce(None))
        self.assertIsNone(Catalog([]).cheapest())
        with self.assertRaises(UnknownProduceError):
            DEFAULT_CATALOG.require("banana")
        self.assertEqual(DEFAULT_CATALOG.require("corn").sell_price, 30)

    def test_invalid_entries_rejected(self):
        with self.assertRaises(ValueError):
            ProduceType("rock", "Rock", "r", seed_cost=0, sell_price=1, growth_time_in_days=1)
        entry = ProduceType("kale", "Kale", "k", seed_cost=1, sell_price=1, growth_time_in_days=1)
        with self.assertRaises(ValueError):
            Catalog([entry, entry])


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = build_config()
        self.assertEqual(config["INITIAL_CASH"], 100)
        self.assertEqual(config["PLOT_COUNT"], 9)
        self.assertEqual(config["INITIAL_SEEDS"], (("tomato", 5), ("strawberry", 3)))
        self.assertEqual((config["DAYS_IN_WEEK"], config["HOURS_IN_DAY"], config["TICK_INTERVAL_MS"]), (7, 24, 200))
        self.assertEqual((config["PRIORITY_THRESHOLD"], config["PRIORITY_BATCH_SIZE"]), (3, 5))
        self.assertEqual((config["ANY_SEED_THRESHOLD"], config["CHEAPEST_BATCH_SIZE"]), (2, 3))

    def test_overrides(self):
        catalog = [ProduceType("kale", "Kale", "k", seed_cost=2, sell_price=4, growth_time_in_days=1)]
        config = build_config({"INITIAL_SEEDS": {"kale": 4}, "CATALOG": catalog, "PRIORITY_PRODUCE_ID": None})
        self.assertEqual(config["INITIAL_SEEDS"], (("kale", 4),))
        self.assertIsInstance(config["CATALOG"], Catalog)
        sim = FarmSimulation(config)
        sim.advance_days(1)
        self.assertEqual([p.produce_id for p in sim.plots[:4]], ["kale"] * 4)

    def test_unknown_and_invalid_options_rejected(self):
        with self.assertRaises(ValueError):
            build_config({"PLOT_CONT": 9})
        with self.assertRaises(ValueError):
            build_config({"PLOT_COUNT": 0})
        with self.assertRaises(ValueError):
            build_config({"INITIAL_CASH": -1})

    def test_scenarios_do_not_share_state(self):
        self.assertEqual(SCENARIO_B["PLOT_COUNT"], 16)
        self.assertEqual(SCENARIO_A["PLOT_COUNT"], 9)
        self.assertEqual(len(FarmSimulation(SCENARIO_B).plots), 16)


if __name__ == '__main__':
    unittest.main()
