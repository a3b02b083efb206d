"""
paracurve CLI - Main entry point.

Generates curve collections, evaluates curves and times the sum-of-radii
reductions from the command line.
"""

import argparse
import logging
import math
import sys
import time
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from paracurve_core import (
    Circle,
    Ellipse,
    Helix,
    Curve,
    ExecutionPolicy,
    count_sum_of_radii,
    create_curves,
    describe_curves,
    get_circles,
    sort_by_radius,
)
from paracurve_core.config import RunConfig, ReductionConfig
from paracurve_core.logging import StructuredLogger, LogEvent, create_logger


CURVE_ARITY = {
    'circle': 1,
    'ellipse': 2,
    'helix': 2,
}


def load_run_config(config_path: Optional[str], logger: StructuredLogger) -> RunConfig:
    """
    Load run configuration from YAML, or defaults when no path is given.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid
    """
    if config_path is None:
        return RunConfig()

    try:
        config = RunConfig.from_yaml(Path(config_path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load run configuration",
            metadata={'path': config_path},
            exc_info=e
        )
        raise

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Run configuration loaded",
        metadata={'path': config_path, 'curve_count': config.curve_count}
    )
    return config


def apply_overrides(config: RunConfig, args: argparse.Namespace) -> RunConfig:
    """Apply command-line overrides on top of the loaded configuration."""
    overrides = {}
    if args.count is not None:
        overrides['curve_count'] = args.count
    if args.seed is not None:
        overrides['seed'] = args.seed
    if args.t is not None:
        overrides['evaluation_t'] = args.t
    if args.print_curves:
        overrides['print_curves'] = True
    if args.workers is not None:
        overrides['reduction'] = ReductionConfig(max_workers=args.workers)

    return replace(config, **overrides) if overrides else config


def build_curve(kind: str, params: List[float]) -> Curve:
    """
    Build a single curve from its kind and shape parameters.

    Raises:
        ValueError: If the kind is unknown or the parameter count is wrong
    """
    if kind not in CURVE_ARITY:
        raise ValueError(f"Unknown curve kind: {kind}. Must be one of {sorted(CURVE_ARITY)}")

    if len(params) != CURVE_ARITY[kind]:
        raise ValueError(
            f"{kind} takes {CURVE_ARITY[kind]} parameter(s), got {len(params)}"
        )

    if kind == 'circle':
        return Circle(params[0])
    elif kind == 'ellipse':
        return Ellipse(params[0], params[1])
    return Helix(params[0], params[1])


def format_reduction_line(total: float, policy: ExecutionPolicy, elapsed_us: int) -> str:
    """One timing line per reduction, in the `sum = ..., <policy> solution time` format."""
    return f"sum = {total}, {policy.value} solution time (microseconds): {elapsed_us}"


def run(config: RunConfig, logger: StructuredLogger) -> None:
    """Generate, select, sort and reduce, printing timings per policy."""
    curves = create_curves(config.curve_count, seed=config.seed, config=config.generator)
    logger.info(
        event=LogEvent.CURVES_GENERATED,
        message=f"Generated {len(curves)} curves",
        metadata={'count': len(curves), 'seed': config.seed}
    )

    if config.print_curves:
        for line in describe_curves(curves, config.evaluation_t):
            print(line)

    circles = get_circles(curves)
    logger.info(
        event=LogEvent.CURVES_SELECTED,
        message=f"Selected {len(circles)} circles",
        metadata={'circles': len(circles), 'curves': len(curves)}
    )

    sort_by_radius(circles)
    logger.info(
        event=LogEvent.CURVES_SORTED,
        message="Circles sorted by radius",
        metadata={'circles': len(circles)}
    )

    for policy in ExecutionPolicy:
        start = time.perf_counter()
        total = count_sum_of_radii(circles, policy, config.reduction.max_workers)
        elapsed_us = int((time.perf_counter() - start) * 1_000_000)

        print(format_reduction_line(total, policy, elapsed_us))
        logger.info(
            event=LogEvent.REDUCTION_COMPLETED,
            message="Sum of radii computed",
            metadata={'policy': policy.value, 'sum': total, 'elapsed_us': elapsed_us}
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="paracurve",
        description="paracurve - Evaluate parametric curves and reduce circle radii",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 1,000,000 curves and time both reductions
  paracurve run --count 1000000 --seed 42

  # Use a YAML config, printing every curve at t = pi/4
  paracurve run --config config/run.yaml --print

  # Evaluate a single curve
  paracurve eval helix 1.0 6.283185307179586 --t 3.141592653589793
"""
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # run command
    run_cmd = subparsers.add_parser('run', help='Generate curves and reduce circle radii')
    run_cmd.add_argument('--config', help='Path to run config YAML')
    run_cmd.add_argument('--count', type=int, help='Number of curves to generate')
    run_cmd.add_argument('--seed', type=int, help='Random seed')
    run_cmd.add_argument('--workers', type=int, help='Worker threads for the parallel sum')
    run_cmd.add_argument('--t', type=float, help='Parameter for printed evaluations')
    run_cmd.add_argument(
        '--print',
        dest='print_curves',
        action='store_true',
        help='Print point and derivative of every curve'
    )

    # eval command
    eval_cmd = subparsers.add_parser('eval', help='Evaluate a single curve')
    eval_cmd.add_argument('kind', choices=sorted(CURVE_ARITY), help='Curve kind')
    eval_cmd.add_argument('params', type=float, nargs='+', help='Shape parameters')
    eval_cmd.add_argument('--t', type=float, default=math.pi / 4, help='Curve parameter (default: pi/4)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli")
    if args.quiet:
        logger.set_level(logging.WARNING)

    try:
        if args.command == 'run':
            config = apply_overrides(load_run_config(args.config, logger), args)
            run(config, logger)

        elif args.command == 'eval':
            curve = build_curve(args.kind, args.params)
            print(next(describe_curves([curve], args.t)))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
