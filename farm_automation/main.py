"""
Main entry point for the simulation.
"""
import argparse
import logging

import simpy.rt

from .sim_model import FarmSimulation
from .config import SCENARIO_A, SCENARIO_B
from .analytics import Analytics, DailyRecorder


def run_scenario(scenario_config, days=28, realtime=False, speedup=1.0):
    scenario_name = scenario_config['NAME']
    print(f"\nRunning {scenario_name}...")
    print(f"  Configuration: {scenario_config['PLOT_COUNT']} plots, ${scenario_config['INITIAL_CASH']} starting cash")

    env = None
    if realtime:
        # 1 sim unit = 1 ms; speedup > 1 runs faster than the wall clock
        env = simpy.rt.RealtimeEnvironment(factor=0.001 / speedup, strict=False)

    sim = FarmSimulation(scenario_config, env=env)
    recorder = DailyRecorder(sim)
    if realtime:
        sim.subscribe_day(_print_day)
    sim.run_days(days)
    return sim, recorder


def _print_day(sim, result):
    print(f"[Week {sim.week} Day {sim.clock.day_of_week}] cash ${sim.cash}")
    if result.notification:
        for line in result.notification.splitlines():
            print(f"    {line}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Automated farm simulation")
    parser.add_argument("--days", type=int, default=28, help="simulated days per scenario")
    parser.add_argument("--realtime", action="store_true", help="pace ticks against the wall clock")
    parser.add_argument("--speedup", type=float, default=1.0, help="real-time speed multiplier")
    parser.add_argument("--graphs", metavar="DIR", help="write comparison graphs to DIR")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every automation step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    analytics = Analytics()
    for scenario in (SCENARIO_A, SCENARIO_B):
        sim, recorder = run_scenario(scenario, days=args.days, realtime=args.realtime, speedup=args.speedup)
        analytics.add_result(scenario["NAME"], sim, recorder)

    # Report
    analytics.print_summary()
    if args.graphs:
        analytics.generate_graphs(args.graphs)
    return analytics


if __name__ == "__main__":
    main()
