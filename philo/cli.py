"""Command-line entry point: philo N die eat sleep [meals]."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.parsing import InputError, parse_input
from philo.simulation import run
from philo.utils import format_error


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_input(args)
    except InputError as exc:
        print(format_error(str(exc)))
        return 1
    run(settings, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())