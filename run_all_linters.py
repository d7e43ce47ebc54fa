#!/usr/bin/env python3
"""Run the formatters, linters and the test suite in one go.

Steps, in order:
1. Black format check
2. isort import order check
3. Ruff static checks
4. Pylint on the source packages
5. pytest

All output is collected and a summary is printed at the end.
"""

from pathlib import Path
import subprocess
import sys

COMMANDS: list[tuple[list[str], str]] = [
    ([sys.executable, "-m", "black", ".", "--check"], "Black format check"),
    ([sys.executable, "-m", "isort", ".", "--check-only"], "isort import order"),
    ([sys.executable, "-m", "ruff", "check", "."], "Ruff"),
    ([sys.executable, "-m", "pylint", "app", "core", "infrastructure"], "Pylint"),
    ([sys.executable, "-m", "pytest", "-q"], "pytest"),
]


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """Run `cmd` from the repository root; return (success, combined output)."""
    print(f"\n{'=' * 60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, check=False, cwd=Path(__file__).parent
        )
    except OSError as e:
        print(f"FAILED to start: {e}")
        return False, str(e)

    output = result.stdout + result.stderr
    success = result.returncode == 0
    print("OK" if success else "FAILED")
    print(output.strip() or "(no output)")
    return success, output


def main() -> None:
    results = [(desc, *run_command(cmd, desc)) for cmd, desc in COMMANDS]

    print(f"\n{'=' * 60}")
    print("Summary")
    print("=" * 60)
    for description, success, _ in results:
        print(f"{description}: {'passed' if success else 'FAILED'}")

    all_passed = all(success for _, success, _ in results)
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
