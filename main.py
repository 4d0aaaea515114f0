#!/usr/bin/env python3
"""
DocFlow Patterns

CLI demonstration of Chain of Responsibility, Strategy and Visitor
applied to document processing.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config.settings import load_config
from core.pipeline import DocumentPipeline
from core.strategy import StrategyFactory
from utils.logger import LogContext, setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="DocFlow design patterns demonstration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default demonstration
  python main.py

  # Check a TXT document and save it
  python main.py --doc-type TXT --strategy save

  # Show the no-strategy notice, exit without waiting
  python main.py --strategy none --no-wait
        """,
    )

    parser.add_argument(
        "--doc-type",
        help="Document type to check (default: from config)",
    )

    parser.add_argument(
        "--strategy",
        help="Processing strategy, or 'none' to leave it unset (default: from config)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Exit without waiting for Enter",
    )

    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available processing strategies",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Quiet mode (errors only)",
    )

    return parser.parse_args(argv)


def list_strategies() -> None:
    """List available processing strategies."""
    print("\nAvailable strategies:")
    print("=" * 30)
    for name in StrategyFactory.get_available_strategies():
        print(f"  - {name}")
    print()


def wait_for_enter() -> None:
    """Block until the user presses Enter."""
    try:
        input("\nPress Enter to exit...")
    except EOFError:
        pass


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    log_level = "DEBUG" if args.verbose else ("ERROR" if args.quiet else "INFO")
    logger = setup_logger(
        level=log_level,
        log_file=str(args.log_file) if args.log_file else None,
    )

    if args.list_strategies:
        list_strategies()
        return 0

    try:
        config = load_config(str(args.config) if args.config else None)
        overrides = {}
        if args.doc_type is not None:
            overrides["doc_type"] = args.doc_type
        if args.strategy is not None:
            overrides["strategy"] = args.strategy

        pipeline = DocumentPipeline(config=config, overrides=overrides)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    with LogContext(logger, "demonstration", doc_type=pipeline.doc_type) as ctx:
        result = pipeline.run()
        ctx.set_outcome(
            f"{result['doc_type']!r} accepted, {len(result['visited'])} documents visited"
            if result["success"]
            else f"{result['doc_type']!r} rejected, strategy skipped"
        )

    if pipeline.wait_for_input and not args.no_wait:
        wait_for_enter()

    return 0


if __name__ == "__main__":
    sys.exit(main())
