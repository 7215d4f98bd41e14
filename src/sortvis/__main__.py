"""Command line entry point: list algorithms, run one headless, or open the viewer."""

import argparse
import logging
import sys

import numpy as np

from . import __version__
from .arrays import generate_array
from .catalog import CATALOG, describe, list_algorithms
from .config import DEFAULT_ARRAY_SIZE, PlaybackConfig
from .errors import SortVisError
from .runner import run_algorithm

logger = logging.getLogger(__name__)


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _build_parser():
    parser = argparse.ArgumentParser(prog="sortvis", description=__doc__)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List the available algorithms")

    run = sub.add_parser("run", help="Run one algorithm without a window")
    run.add_argument("algorithm", choices=list(CATALOG))
    run.add_argument("--size", type=int, default=DEFAULT_ARRAY_SIZE)
    run.add_argument("--seed", type=int, default=None)
    run.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after this many steps (needed to bound bogo sort)",
    )

    sub.add_parser("gui", help="Open the interactive visualizer")
    return parser


def _cmd_list():
    for algorithm_id, name in list_algorithms():
        print(f"{algorithm_id:<10} {name:<18} {describe(algorithm_id)['complexity']}")
    return 0


def _cmd_run(args):
    rng = np.random.default_rng(args.seed)
    values = generate_array(args.size, rng)
    result = run_algorithm(args.algorithm, values, max_steps=args.max_steps, rng=rng)
    print(f"algorithm:   {result.algorithm_id}")
    print(f"size:        {len(result.initial)}")
    print(f"steps:       {result.metrics.steps}")
    print(f"comparisons: {result.metrics.comparisons}")
    print(f"accesses:    {result.metrics.accesses}")
    print(f"completed:   {result.completed}")
    print(f"sorted:      {result.sorted}")
    return 0 if result.sorted else 1


def main(argv=None):
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.command == "list":
            return _cmd_list()
        if args.command == "run":
            return _cmd_run(args)
        from .viewer import main as viewer_main

        return viewer_main(PlaybackConfig.from_env())
    except SortVisError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
