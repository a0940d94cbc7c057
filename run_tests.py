#!/usr/bin/env python3
"""
Simple test runner for the fleet battle simulator.

Runs the pytest suite, ruff and pyright with the current interpreter.
"""

import sys
import subprocess
import argparse


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and handle errors."""
    print(f"=== {description} ===")
    print(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        print(result.stdout)
        if result.stderr:
            print("STDERR:", result.stderr)
        print(f"{description} completed successfully\n")
        return True
    except subprocess.CalledProcessError as e:
        print(f"{description} failed with exit code {e.returncode}")
        print("STDOUT:", e.stdout)
        print("STDERR:", e.stderr)
        print()
        return False


def run_unit_tests(verbose: bool = True, include_integration: bool = True) -> bool:
    """Run the test suite."""
    cmd = [sys.executable, "-m", "pytest", "tests/"]
    if not include_integration:
        cmd += ["-m", "not integration"]
    if verbose:
        cmd.append("-v")
    return run_command(cmd, "Tests")


def run_specific_test(test_file: str, verbose: bool = True) -> bool:
    """Run a specific test file under tests/."""
    cmd = [sys.executable, "-m", "pytest", "tests/", "-k", test_file.removesuffix(".py")]
    if verbose:
        cmd.append("-v")
    return run_command(cmd, f"Test: {test_file}")


def run_lint_check() -> bool:
    """Run code linting with ruff."""
    cmd = [sys.executable, "-m", "ruff", "check", "."]
    return run_command(cmd, "Code Linting (Ruff)")


def run_type_check() -> bool:
    """Run type checking with pyright."""
    cmd = [sys.executable, "-m", "pyright", "."]
    return run_command(cmd, "Type Checking (Pyright)")


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(
        description="Simple test runner for the fleet battle simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                    # Run all tests
  python run_tests.py --quiet            # Run tests with minimal output
  python run_tests.py --unit-only        # Skip integration tests
  python run_tests.py --test battle_engine  # Run specific test file
  python run_tests.py --lint             # Run linting only
  python run_tests.py --types            # Run type checking only
  python run_tests.py --all              # Run tests, linting, and type checking
        """
    )

    parser.add_argument(
        "--test",
        help="Run specific test file (e.g., 'battle_engine' for test_battle_engine.py)"
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="Run with minimal output")
    parser.add_argument("--unit-only", action="store_true", help="Skip tests marked as integration")
    parser.add_argument("--lint", action="store_true", help="Run code linting only")
    parser.add_argument("--types", action="store_true", help="Run type checking only")
    parser.add_argument("--all", action="store_true", help="Run tests, linting, and type checking")

    args = parser.parse_args()

    verbose = not args.quiet

    if args.test:
        test_file = args.test
        if not test_file.startswith("test_"):
            test_file = f"test_{test_file}"
        success = run_specific_test(test_file, verbose)
    elif args.lint:
        success = run_lint_check()
    elif args.types:
        success = run_type_check()
    elif args.all:
        success = run_unit_tests(verbose)
        if success:
            success = run_lint_check()
        if success:
            success = run_type_check()
    else:
        success = run_unit_tests(verbose, include_integration=not args.unit_only)

    if success:
        print("All operations completed successfully!")
        sys.exit(0)
    else:
        print("Some operations failed. See output above for details.")
        sys.exit(1)


if __name__ == "__main__":
    main()
