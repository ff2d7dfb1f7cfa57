"""
Configuration constants for the Automated Farm Simulation.
"""
from .catalog import Catalog, DEFAULT_CATALOG

# Simulation Time Unit: Milliseconds (real time)
TICK_INTERVAL_MS = 200  # One game hour per tick
NOTIFICATION_TTL_MS = 5000

# Calendar
HOURS_IN_DAY = 24
DAYS_IN_WEEK = 7  # Sales cycle

# Farm
INITIAL_CASH = 100
PLOT_COUNT = 9  # 3x3 grid
INITIAL_SEEDS = (
    ("tomato", 5),
    ("strawberry", 3),
)

# Automation
PRIORITY_PRODUCE_ID = "strawberry"
PRIORITY_THRESHOLD = 3  # Buy priority seeds while stock is below this
PRIORITY_BATCH_SIZE = 5
ANY_SEED_THRESHOLD = 2  # Buy the cheapest seed while total stock is below this
CHEAPEST_BATCH_SIZE = 3

# Scenarios
# Scenario A: the stock farm
SCENARIO_A = {
    "NAME": "Scenario A (Baseline)",
    "INITIAL_CASH": INITIAL_CASH,
    "PLOT_COUNT": PLOT_COUNT,
    "INITIAL_SEEDS": INITIAL_SEEDS,
    "DAYS_IN_WEEK": DAYS_IN_WEEK,
    "HOURS_IN_DAY": HOURS_IN_DAY,
    "TICK_INTERVAL_MS": TICK_INTERVAL_MS,
    "NOTIFICATION_TTL_MS": NOTIFICATION_TTL_MS,
    "PRIORITY_PRODUCE_ID": PRIORITY_PRODUCE_ID,
    "PRIORITY_THRESHOLD": PRIORITY_THRESHOLD,
    "PRIORITY_BATCH_SIZE": PRIORITY_BATCH_SIZE,
    "ANY_SEED_THRESHOLD": ANY_SEED_THRESHOLD,
    "CHEAPEST_BATCH_SIZE": CHEAPEST_BATCH_SIZE,
    "CATALOG": DEFAULT_CATALOG,
}

# Scenario B: bigger field and a deeper wallet
SCENARIO_B = dict(
    SCENARIO_A,
    NAME="Scenario B (Expanded)",
    INITIAL_CASH=250,
    PLOT_COUNT=16,
)

_POSITIVE_INT_KEYS = (
    "PLOT_COUNT", "DAYS_IN_WEEK", "HOURS_IN_DAY", "TICK_INTERVAL_MS",
    "NOTIFICATION_TTL_MS", "PRIORITY_BATCH_SIZE", "CHEAPEST_BATCH_SIZE",
)


def build_config(overrides=None):
    """
    Merge `overrides` over Scenario A and validate the result.
    Unknown keys are rejected so that typos do not silently fall back to defaults.
    """
    config = dict(SCENARIO_A)
    overrides = dict(overrides or {})
    unknown = sorted(set(overrides) - set(SCENARIO_A))
    if unknown:
        raise ValueError(f"Unknown configuration option(s): {', '.join(unknown)}")
    config.update(overrides)

    for key in _POSITIVE_INT_KEYS:
        if not isinstance(config[key], int) or config[key] <= 0:
            raise ValueError(f"{key} must be a positive integer, got {config[key]!r}")
    if config["INITIAL_CASH"] < 0:
        raise ValueError("INITIAL_CASH must not be negative")

    # Accept both a mapping and a sequence of (id, qty) pairs
    seeds = config["INITIAL_SEEDS"]
    if hasattr(seeds, "items"):
        seeds = seeds.items()
    config["INITIAL_SEEDS"] = tuple((produce_id, qty) for produce_id, qty in seeds)

    if not isinstance(config["CATALOG"], Catalog):
        config["CATALOG"] = Catalog(config["CATALOG"])
    return config
