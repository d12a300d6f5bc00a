"""Module entry point for running with python -m when_present."""

from when_present.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
