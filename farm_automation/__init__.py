"""
Automated farm simulation: a plot grid, a simulated clock and a daily
harvest -> plant -> shop -> weekly sale pipeline.
"""
from .catalog import Catalog, ProduceType, DEFAULT_CATALOG, find_produce
from .sim_model import FarmSimulation

__all__ = ["Catalog", "ProduceType", "DEFAULT_CATALOG", "find_produce", "FarmSimulation"]
