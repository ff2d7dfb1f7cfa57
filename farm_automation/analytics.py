"""
Analytics and Visualization.
"""
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .entities import PlotState


class DailyRecorder:
    """Collects one row per committed day from a running FarmSimulation."""

    COLUMNS = [
        "day", "week", "cash", "seeds", "harvested_stock",
        "growing", "ready", "empty", "harvested", "planted", "purchased", "week_earnings",
    ]

    def __init__(self, sim):
        self.rows = []
        sim.subscribe_day(self.record)

    def record(self, sim, result):
        self.rows.append({
            "day": result.snapshot.day,
            "week": sim.week,
            "cash": sim.cash,
            "seeds": sim.seeds.total(),
            "harvested_stock": sim.harvested.total(),
            "growing": sim.grid.count(PlotState.GROWING),
            "ready": sim.grid.count(PlotState.READY_FOR_HARVEST),
            "empty": sim.grid.count(PlotState.EMPTY),
            "harvested": result.harvested,
            "planted": result.planted,
            "purchased": sum(result.purchased.values()),
            "week_earnings": result.week_earnings,
        })

    def to_frame(self):
        return pd.DataFrame(self.rows, columns=self.COLUMNS)


class Analytics:
    def __init__(self):
        self.results = {}  # {scenario_name: stats_dict}

    def add_result(self, scenario_name, simulation_obj, recorder):
        days = recorder.to_frame()
        plot_count = len(simulation_obj.grid)
        occupied = (days["growing"] + days["ready"]) / plot_count
        weekly = days[days["week_earnings"] > 0]
        stats = {
            "days_simulated": len(days),
            "final_cash": simulation_obj.cash,
            "total_earnings": simulation_obj.total_earnings,
            "total_harvested": int(days["harvested"].sum()),
            "avg_weekly_earnings": np.mean(weekly["week_earnings"]) if len(weekly) else 0,
            "plot_utilization": np.mean(occupied) * 100 if len(days) else 0,  # percent
            "daily": days,
        }
        self.results[scenario_name] = stats

    def print_summary(self):
        print("\n=== SIMULATION RESULTS ===")
        for name, stats in self.results.items():
            print(f"Scenario: {name}")
            print(f"  - Days Simulated: {stats['days_simulated']}")
            print(f"  - Final Cash: ${stats['final_cash']}")
            print(f"  - Total Sales: ${stats['total_earnings']}")
            print(f"  - Produce Harvested: {stats['total_harvested']}")
            print(f"  - Avg Weekly Sales: ${stats['avg_weekly_earnings']:.2f}")
            print(f"  - Avg Plot Utilization: {stats['plot_utilization']:.1f}%")
            print("-" * 30)

    def generate_graphs(self, output_dir="results"):
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        # 1. Cash over time
        plt.figure(figsize=(10, 6))
        for name, stats in self.results.items():
            days = stats["daily"]
            plt.plot(days["day"], days["cash"], label=name)
        plt.title('Cash at End of Automation')
        plt.xlabel('Day')
        plt.ylabel('Cash ($)')
        plt.legend()
        plt.savefig(f"{output_dir}/cash_over_time.png")
        plt.close()

        # 2. Weekly sales comparison
        plt.figure(figsize=(10, 6))
        for name, stats in self.results.items():
            days = stats["daily"]
            sales = days[days["week_earnings"] > 0]
            plt.plot(sales["week"], sales["week_earnings"], marker="o", label=name)
        plt.title('Weekly Sales')
        plt.xlabel('Week')
        plt.ylabel('Earnings ($)')
        plt.legend()
        plt.savefig(f"{output_dir}/weekly_sales.png")
        plt.close()

        # 3. Utilization comparison
        scenarios = list(self.results.keys())
        utils = [self.results[s]["plot_utilization"] for s in scenarios]
        plt.figure(figsize=(10, 6))
        plt.bar(scenarios, utils, color=["blue", "orange"])
        plt.title('Average Plot Utilization')
        plt.ylabel('Utilization (%)')
        plt.ylim(0, 100)
        plt.savefig(f"{output_dir}/utilization_comparison.png")
        plt.close()

        print(f"Graphs saved to {os.path.abspath(output_dir)}")
