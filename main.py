#!/usr/bin/env python3
"""
Module Clustering - Hill Climbing Search

Main entry point for the clustering search.
Clusters the classes of a project read from an ODEM/CDA dependency
document by maximizing modularization quality (MQ).
"""

import sys
import argparse
from pathlib import Path

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))

from clustering.config_loader import print_config_summary, ConfigurationError
from clustering.cda_reader import CDAParseError
from hillclimb.cli import ConfigValidationError, run_from_config
from hillclimb.orchestration import run_single_mode, run_trials_mode


def build_parser() -> argparse.ArgumentParser:
    """Command-line options of the clustering search"""
    parser = argparse.ArgumentParser(
        description="Module Clustering - Hill Climbing Search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 main.py                               # One search with config.yaml
  python3 main.py --summary                     # Print the configuration first
  python3 main.py --trials 10                   # Ten searches with consecutive seeds
  python3 main.py --config custom.yaml          # Custom config file
  python3 main.py --run examples/trials_run.yaml  # Mode and config from a run file
        """
    )

    parser.add_argument(
        '--config', '-c',
        default='config.yaml',
        help='Configuration file path (default: config.yaml)'
    )

    parser.add_argument(
        '--summary', '-s',
        action='store_true',
        help='Print a configuration summary before running'
    )

    parser.add_argument(
        '--trials', '-t',
        type=int,
        metavar='N',
        help='Run N trials with consecutive seeds'
    )

    parser.add_argument(
        '--run', '-r',
        metavar='RUN_CONFIG',
        help='Run file naming the mode (single/trials) and the configuration to use'
    )

    return parser


def main(argv=None):
    """Main entry point with command-line argument parsing"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.trials is not None and args.trials <= 0:
        parser.error("--trials must be a positive integer")
    if args.run and args.trials is not None:
        parser.error("--trials cannot be combined with --run")

    try:
        if args.run:
            run_from_config(args.run)
            return

        if args.summary:
            print_config_summary(args.config)

        if args.trials:
            run_trials_mode(args.config, args.trials)
        else:
            run_single_mode(args.config)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)
    except (ConfigurationError, ConfigValidationError, CDAParseError, FileNotFoundError) as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
