"""
Command-line driver: build random curves, run the pipeline, print the report.

    curvekit --count 20 --seed 7 --workers 4 --kind circle
    python -m curvekit --config run.yaml --log-level INFO
"""
import argparse
import logging
import sys
from typing import List, Optional

from curvekit.config import (
    ConfigError,
    PipelineConfig,
    config_from_dict,
    config_to_dict,
    config_to_yaml,
    load_config,
)
from curvekit.curves import CurveKind, InvalidCurveError
from curvekit.formatting import format_report
from curvekit.pipeline import run_from_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curvekit",
        description="Generate random 3D curves, evaluate them and sum the radii of one kind in parallel",
    )
    parser.add_argument('--config', help='YAML configuration file; flags below override it')
    parser.add_argument('--count', type=int, help='Number of random curves (default 10)')
    parser.add_argument('--t', type=float, help='Evaluation parameter in radians (default pi/4)')
    parser.add_argument('--workers', type=int, help='Worker threads for the radius sum (default 4)')
    parser.add_argument(
        '--kind',
        choices=[k.value for k in CurveKind],
        help='Curve kind to filter, sort and sum (default circle)',
    )
    parser.add_argument('--seed', type=int, help='Random seed for reproducible runs')
    parser.add_argument('--dump-config', action='store_true', help='Print the effective configuration as YAML and exit')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default WARNING)',
    )
    return parser


def resolve_config(args: argparse.Namespace) -> PipelineConfig:
    """Merge the optional config file with command-line overrides."""
    base = load_config(args.config) if args.config else PipelineConfig()
    values = config_to_dict(base)
    for key in ("count", "t", "workers", "kind", "seed"):
        override = getattr(args, key)
        if override is not None:
            values[key] = override
    return config_from_dict(values)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    try:
        config = resolve_config(args)
        if args.dump_config:
            print(config_to_yaml(config), end="")
            return 0
        logger.debug("Effective configuration: %s", config_to_dict(config))
        report = run_from_config(config)
    except (ConfigError, InvalidCurveError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_report(report))
    return 0


if __name__ == '__main__':
    sys.exit(main())
