"""
Stocks held by the farm: seeds, harvested produce and cash.
"""
from .errors import InsufficientFundsError, InsufficientSeedStockError


def _check_quantity(quantity):
    if not isinstance(quantity, int) or quantity <= 0:
        raise ValueError(f"Quantity must be a positive integer, got {quantity!r}")


class _ProduceLedger:
    """
    Quantities keyed by produce id, at most one entry per id.
    Entries keep the order in which their id was first added.
    """
    def __init__(self, items=()):
        self._stock = {}
        if hasattr(items, "items"):
            items = items.items()
        for produce_id, quantity in items:
            if quantity:
                self.add(produce_id, quantity)

    def add(self, produce_id, quantity):
        _check_quantity(quantity)
        self._stock[produce_id] = self._stock.get(produce_id, 0) + quantity

    def quantity(self, produce_id):
        return self._stock.get(produce_id, 0)

    def total(self):
        return sum(self._stock.values())

    def items(self):
        """List of (produce_id, quantity) pairs in ledger order."""
        return list(self._stock.items())

    def copy(self):
        clone = type(self)()
        clone._stock = dict(self._stock)
        return clone

    def __len__(self):
        return len(self._stock)

    def __bool__(self):
        return bool(self._stock)

    def __iter__(self):
        return iter(self._stock)

    def __eq__(self, other):
        if isinstance(other, _ProduceLedger):
            return self.items() == other.items()
        if isinstance(other, dict):
            return self._stock == other
        return NotImplemented

    def __repr__(self):
        return f"{type(self).__name__}({self._stock})"


class SeedInventory(_ProduceLedger):
    """Plantable seeds. Zero-quantity entries are pruned."""

    def consume(self, produce_id, quantity=1):
        _check_quantity(quantity)
        available = self.quantity(produce_id)
        if available < quantity:
            raise InsufficientSeedStockError(produce_id, quantity, available)
        self._stock[produce_id] = available - quantity
        self.prune()

    def first_in_stock(self):
        for produce_id, quantity in self._stock.items():
            if quantity > 0:
                return produce_id
        return None

    def prune(self):
        self._stock = {k: v for k, v in self._stock.items() if v > 0}


class HarvestLedger(_ProduceLedger):
    """Produce collected this week, awaiting the weekly sale."""

    def clear(self):
        self._stock = {}


class CashLedger:
    def __init__(self, balance=0):
        self.balance = balance

    def can_afford(self, amount):
        return self.balance >= amount

    def deposit(self, amount):
        if amount < 0:
            raise ValueError(f"Cannot deposit a negative amount: {amount}")
        self.balance += amount

    def withdraw(self, amount):
        if amount < 0:
            raise ValueError(f"Cannot withdraw a negative amount: {amount}")
        if not self.can_afford(amount):
            raise InsufficientFundsError(amount, self.balance)
        self.balance -= amount

    def __repr__(self):
        return f"CashLedger(${self.balance})"
