#!/usr/bin/env python3
"""
Test runner for the Blogmon engine.

Runs pytest over a selection of test modules or marker categories.

Usage:
    python run_tests.py                         # Run all tests
    python run_tests.py --category scoring      # One module group
    python run_tests.py --marker idempotency    # One marker category
    python run_tests.py --quick                 # Stop on first failure
    python run_tests.py --list                  # List groups and markers
"""

import argparse
import subprocess
import sys
from datetime import datetime
from pathlib import Path

from tests.test_config import TEST_CATEGORIES

# Module groups
TEST_MODULES = {
    "scoring": ["tests/test_scoring.py"],
    "topics": ["tests/test_topics.py", "tests/test_graph.py", "tests/test_trends.py"],
    "signals": ["tests/test_signals.py"],
    "models": ["tests/test_models.py"],
    "storage": ["tests/test_storage.py"],
    "pipeline": ["tests/test_pipeline.py"],
    "config": ["tests/test_system_config_validation.py"],
    "e2e": ["tests/test_system_end_to_end.py"],
}


def list_categories() -> None:
    """Print module groups and marker categories."""
    print("\n" + "=" * 60)
    print("MODULE GROUPS (--category)")
    print("=" * 60)
    for key, paths in TEST_MODULES.items():
        print(f"  {key:12} {', '.join(Path(p).name for p in paths)}")

    print("\nMARKERS (--marker)")
    for marker, info in TEST_CATEGORIES.items():
        print(f"  {marker:18} {info['description']}")
    print("=" * 60)


def build_command(categories=None, marker=None, verbose=False, quick=False) -> list:
    """Assemble the pytest command line."""
    cmd = [sys.executable, "-m", "pytest"]

    paths = []
    for category in categories or []:
        paths.extend(p for p in TEST_MODULES.get(category, []) if Path(p).exists())
    cmd.extend(paths or ["tests/"])

    if marker:
        cmd.extend(["-m", marker])

    cmd.append("-v" if verbose else "--tb=short")

    if quick:
        cmd.extend(["-x", "--ff"])

    return cmd


def run_tests(categories=None, marker=None, verbose=False, quick=False) -> int:
    """Run tests with the given selection."""
    cmd = build_command(categories, marker, verbose, quick)

    print("\n" + "=" * 60)
    print("BLOGMON ENGINE TEST RUNNER")
    print("=" * 60)
    print(f"Started:    {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"Categories: {', '.join(categories) if categories else 'ALL'}")
    print(f"Marker:     {marker or '-'}")
    print("=" * 60 + "\n")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main() -> int:
    parser = argparse.ArgumentParser(description="Run Blogmon engine tests")
    parser.add_argument("--category", "-c", type=str,
                        help="Module group(s) to run, comma-separated")
    parser.add_argument("--marker", "-m", type=str, choices=sorted(TEST_CATEGORIES),
                        help="Only run tests with this marker")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show verbose output")
    parser.add_argument("--quick", "-q", action="store_true", help="Stop on first failure")
    parser.add_argument("--list", "-l", action="store_true", help="List groups and markers")

    args = parser.parse_args()

    if args.list:
        list_categories()
        return 0

    categories = [c.strip() for c in args.category.split(",")] if args.category else None
    return run_tests(categories=categories, marker=args.marker, verbose=args.verbose, quick=args.quick)


if __name__ == "__main__":
    sys.exit(main())
