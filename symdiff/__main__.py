"""Run the partition benchmark: python -m symdiff"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from symdiff.bench.config import BenchConfig
from symdiff.bench.driver import InputPool, run
from symdiff.bench.report import format_run, to_json
from symdiff.core.errors import SymdiffError
from symdiff.core.partition import get_algorithm
from symdiff.core.types import numeric_ascending
from symdiff.core.verify import compare_partitions

logger = logging.getLogger("symdiff")


def _setup_logging(verbose: bool) -> None:
    # stdout carries the report only
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    defaults = BenchConfig()
    parser = argparse.ArgumentParser(
        prog="symdiff",
        description="Benchmark naive vs map-based symmetric set-partition",
    )
    parser.add_argument("--steps", type=int, nargs="+", default=list(defaults.steps),
                        help="Step sizes, used as repeat counts and as input sizes")
    parser.add_argument("--length", type=int, default=defaults.base_length,
                        help="Length of each base input list")
    parser.add_argument("--first-max", type=int, default=defaults.first_max,
                        help="Max value in the first input list")
    parser.add_argument("--second-max", type=int, default=defaults.second_max,
                        help="Max value in the second input list")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Report format")
    parser.add_argument("--verify", action="store_true",
                        help="Check both algorithms agree before timing")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every timed cell")
    return parser


def _verify(config: BenchConfig, pool: InputPool) -> bool:
    a, b = pool.slice(max(config.steps))
    expected = get_algorithm(config.baseline)(a, b, numeric_ascending)
    actual = get_algorithm(config.candidate)(a, b, numeric_ascending)
    result = compare_partitions(expected, actual)
    logger.log(logging.INFO if result.passed else logging.ERROR, "%s", result.summary())
    return result.passed


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = dataclasses.replace(
            BenchConfig(),
            steps=tuple(args.steps),
            base_length=args.length,
            first_max=args.first_max,
            second_max=args.second_max,
        )
        pool = InputPool.build(config.base_length, config.first_max, config.second_max)
        if args.verify and not _verify(config, pool):
            logger.error("%s and %s disagree", config.baseline, config.candidate)
            return 1
        result = run(config, pool=pool)
    except SymdiffError as e:
        logger.error("%s", e)
        return 1

    print(to_json(result) if args.format == "json" else format_run(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
