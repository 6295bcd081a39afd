"""
Run the predator-prey simulation headless and print population summaries.

Example:
    python scripts/run_simulation.py --ticks 500 --seed 42 --depth 50 --width 80
"""

import argparse
import sys
import time
from pathlib import Path

from predprey.loader import DataLoadError
from predprey.simulation import PredPreySimulation


DEFAULT_DATA_ROOT = Path(__file__).parent.parent / "data"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless predator-prey grid simulation")
    parser.add_argument('--data-root', type=Path, default=DEFAULT_DATA_ROOT,
                        help="Data pack directory (world/, species/, schemas/)")
    parser.add_argument('--ticks', type=int, default=500, help="Number of ticks to run")
    parser.add_argument('--seed', type=int, default=None, help="Override world seed")
    parser.add_argument('--depth', type=int, default=None, help="Override field depth")
    parser.add_argument('--width', type=int, default=None, help="Override field width")
    parser.add_argument('--no-schema', action='store_true', help="Skip JSON schema validation")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    schema_dir = None if args.no_schema else args.data_root / "schemas"

    try:
        sim = PredPreySimulation(
            data_root=args.data_root,
            schema_dir=schema_dir,
            seed=args.seed,
            depth=args.depth,
            width=args.width
        )
    except DataLoadError as e:
        print(f"[FAIL] Could not load data pack: {e}")
        return 1

    sim.print_tick_summary()

    start = time.perf_counter()
    ran = sim.simulate(args.ticks)
    elapsed = time.perf_counter() - start

    print("=" * 60)
    sim.print_tick_summary()
    print(f"[OK] Ran {ran} ticks in {elapsed:.2f} s")
    return 0


if __name__ == '__main__':
    sys.exit(main())
