#!/usr/bin/env python3
"""
Test runner for the link shortener.

Usage:
    python run_tests.py                  # whole suite
    python run_tests.py -k redirect      # extra args go straight to pytest

Tests run against a throwaway SQLite database, so no MongoDB is needed.
Service logging is turned down to WARNING unless LOG_LEVEL is already set.
"""

import os
import subprocess
import sys

DEFAULT_PYTEST_ARGS = ["tests/", "-v", "--tb=short"]


def build_command(args):
    """pytest command line; caller args replace the defaults"""
    return [sys.executable, "-m", "pytest", *(args or DEFAULT_PYTEST_ARGS)]


def build_env(environ):
    env = dict(environ)
    env.setdefault("LOG_LEVEL", "WARNING")
    return env


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    project_dir = os.path.dirname(os.path.abspath(__file__))

    result = subprocess.run(
        build_command(argv),
        cwd=project_dir,
        env=build_env(os.environ),
    )
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
