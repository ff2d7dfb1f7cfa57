"""
Static reference data for the produce that can be grown on the farm.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from .errors import UnknownProduceError


@dataclass(frozen=True)
class ProduceType:
    id: str
    name: str
    icon: str
    seed_cost: int
    sell_price: int
    growth_time_in_days: int

    def __post_init__(self):
        for field_name in ("seed_cost", "sell_price", "growth_time_in_days"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{self.id}: {field_name} must be a positive integer, got {value!r}")


class Catalog:
    """
    Ordered, read-only collection of produce types keyed by id.
    Iteration follows definition order.
    """
    def __init__(self, entries: Iterable[ProduceType]):
        self._entries = tuple(entries)
        self._by_id = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ValueError(f"Duplicate produce id in catalog: {entry.id!r}")
            self._by_id[entry.id] = entry

    def find(self, produce_id) -> Optional[ProduceType]:
        if produce_id is None:
            return None
        return self._by_id.get(produce_id)

    def require(self, produce_id) -> ProduceType:
        try:
            return self._by_id[produce_id]
        except KeyError:
            raise UnknownProduceError(produce_id) from None

    def cheapest(self) -> Optional[ProduceType]:
        """Entry with the lowest seed cost; the first one wins ties."""
        cheapest = None
        for entry in self._entries:
            if cheapest is None or entry.seed_cost < cheapest.seed_cost:
                cheapest = entry
        return cheapest

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, produce_id):
        return produce_id in self._by_id

    def __repr__(self):
        return f"Catalog({[p.id for p in self._entries]})"


AVAILABLE_PRODUCE = (
    ProduceType("tomato", "Tomato", "\N{TOMATO}", seed_cost=5, sell_price=15, growth_time_in_days=3),
    ProduceType("strawberry", "Strawberry", "\N{STRAWBERRY}", seed_cost=10, sell_price=25, growth_time_in_days=2),
    ProduceType("carrot", "Carrot", "\N{CARROT}", seed_cost=3, sell_price=12, growth_time_in_days=4),
    ProduceType("corn", "Corn", "\N{EAR OF MAIZE}", seed_cost=8, sell_price=30, growth_time_in_days=5),
    ProduceType("potato", "Potato", "\N{POTATO}", seed_cost=6, sell_price=20, growth_time_in_days=4),
    ProduceType("wheat", "Wheat", "\N{EAR OF RICE}", seed_cost=4, sell_price=10, growth_time_in_days=6),
)

DEFAULT_CATALOG = Catalog(AVAILABLE_PRODUCE)


def find_produce(produce_id) -> Optional[ProduceType]:
    return DEFAULT_CATALOG.find(produce_id)
