"""
Errors raised by the farm ledgers and plot grid.

None of these are fatal: the automation pipeline and the purchase command
catch them where they act and turn them into skipped steps or notifications.
"""


class FarmError(Exception):
    """Base class for all farm simulation errors."""


class UnknownProduceError(FarmError, KeyError):
    def __init__(self, produce_id):
        super().__init__(produce_id)
        self.produce_id = produce_id

    def __str__(self):
        return f"Unknown produce: {self.produce_id!r}"


class InsufficientFundsError(FarmError):
    def __init__(self, cost, balance):
        super().__init__(f"Cost {cost} exceeds balance {balance}")
        self.cost = cost
        self.balance = balance


class InsufficientSeedStockError(FarmError):
    def __init__(self, produce_id, requested, available):
        super().__init__(
            f"Requested {requested} {produce_id} seed(s), only {available} in stock"
        )
        self.produce_id = produce_id
        self.requested = requested
        self.available = available


class InvalidPlotStateError(FarmError):
    """A plot was asked to plant or harvest in the wrong state."""

    def __init__(self, plot_id, state, action):
        super().__init__(f"Cannot {action} plot {plot_id} in state {state}")
        self.plot_id = plot_id
        self.state = state
        self.action = action
