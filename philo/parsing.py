"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2147483647
MIN_TIMESTAMP_MS = 60
MAX_DIGITS = 10

USAGE = "Wrong input!\nUsage is -> philo 5 800 200 200 [4]"

_SPACES = frozenset(chr(code) for code in range(9, 14)) | {" "}


class InputError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philo_number: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    limit_of_meals: int = -1


def parse_number(text: str) -> int:
    """Parse a non-negative integer no larger than INT_MAX.

    Leading whitespace and a single '+' are accepted; parsing stops at the
    first character that is not a digit.
    """
    rest = text.lstrip("".join(_SPACES))
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise InputError("Feed me only positive values")
    if not rest or not rest[0].isascii() or not rest[0].isdigit():
        raise InputError("The input is not a correct digit")

    digits = []
    for char in rest:
        if not (char.isascii() and char.isdigit()):
            break
        digits.append(char)
    if len(digits) > MAX_DIGITS:
        raise InputError("The value is too big, INT_MAX is the limit")

    value = int("".join(digits))
    if value > INT_MAX:
        raise InputError("The value is too big, INT_MAX is the limit")
    return value


def parse_input(args: Sequence[str]) -> Settings:
    """Build Settings from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise InputError(USAGE)

    philo_number, time_to_die, time_to_eat, time_to_sleep = (
        parse_number(arg) for arg in args[:4]
    )
    if min(time_to_die, time_to_eat, time_to_sleep) < MIN_TIMESTAMP_MS:
        raise InputError("Use timestamps major than 60ms")

    limit_of_meals = parse_number(args[4]) if len(args) == 5 else -1
    return Settings(
        philo_number=philo_number,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        limit_of_meals=limit_of_meals,
    )