"""Module entry point for running with python -m simpletoc."""

from simpletoc.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
