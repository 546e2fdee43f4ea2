"""Command-line interface for large_primes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from large_primes import __version__
from large_primes.config import EngineConfig, load_config
from large_primes.core.integers import lift_digit_limit
from large_primes.dispatcher import Action, dispatch
from large_primes.errors import InternalError, LargePrimesError


def setup_logger(level: int = logging.WARNING, log_path: Optional[Path] = None) -> logging.Logger:
    """Set up the package logger to write to the console and, optionally, a file."""
    logger = logging.getLogger("large_primes")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    # Console handler - stderr so results on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    # File handler - captures everything
    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="large-primes",
        description="Primality testing and prime generation for arbitrarily large integers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  large-primes --action miller-rabin --target 1000000007\n"
            "  large-primes --action power --target 2 --power 100\n"
            "  large-primes --action lucas-lehmer --mersenne-exp 127\n"
            "  large-primes --action generate --maximum 100"
        ),
    )
    parser.add_argument("--action", "-a", required=True, choices=[a.value for a in Action],
                        help="The action to perform")
    parser.add_argument("--target", "-t", help="The target number (base for power)")
    parser.add_argument("--power", "-p", help="Exponent (power only)")
    parser.add_argument("--maximum", "-m", help="Generate primes up to this number (generate only)")
    parser.add_argument("--mersenne-exp", "-e", dest="mersenne_exp",
                        help="Exponent p of the Mersenne number 2^p - 1 (lucas-lehmer only)")
    parser.add_argument("--rounds", "-k", help="Witness rounds (fermat and miller-rabin only)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random base selection")
    parser.add_argument("--config", "-c", default=None, help="JSON configuration file")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    parser.add_argument("--log-file", default=None, help="Append debug log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_config(args: argparse.Namespace) -> EngineConfig:
    config = load_config(args.config) if args.config else EngineConfig()
    if args.seed is not None:
        config.seed = args.seed
    if args.verbose:
        config.log_level = "DEBUG"
    if args.log_file:
        config.log_file = args.log_file
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    lift_digit_limit()

    try:
        config = _resolve_config(args)
        setup_logger(config.level, Path(config.log_file) if config.log_file else None)

        result = dispatch(
            args.action,
            target=args.target,
            power=args.power,
            maximum=args.maximum,
            mersenne_exp=args.mersenne_exp,
            rounds=args.rounds,
            config=config,
        )
    except InternalError as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return 2
    except LargePrimesError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Use --help for more information", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict()))
    else:
        print(result.describe())
    print(f"Total time: {result.elapsed:.6f}s", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
