# philo

A simulation of the dining philosophers problem. Each philosopher runs in a
thread of its own. Each one picks up the fork on its left and then the fork on
its right, eats, sleeps and thinks. Even-numbered philosophers wait half of
the eating time before they start, so that neighbours do not reach for the
same fork at once. A monitor thread checks the table about once a millisecond.
It stops the simulation when a philosopher has gone longer than the time to
die without starting a meal, or when every philosopher has eaten the required
number of meals.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

For example:

```
philo 5 800 200 200
philo 5 800 200 200 4
```

- Each value may have leading whitespace and one leading `+`. A leading `-`
  is rejected. Reading stops at the first character that is not a digit.
  The largest value allowed is 2147483647.
- `TIME_TO_DIE`, `TIME_TO_EAT` and `TIME_TO_SLEEP` are in milliseconds, and
  each must be at least 60.
- `MEALS` is optional. If it is greater than 0, a philosopher stops once it
  has eaten that many times, and the simulation ends once all of them have.
  If it is left out or is 0, there is no meal limit.

Each action is printed on standard output as a line holding a timestamp in
milliseconds since the start, the philosopher's number, and the action. The
timestamp and the number are coloured with ANSI escape codes:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
810 3 died
```

No action lines are printed once the simulation has ended. A lone
philosopher has only one fork. It takes that fork and waits, and it never
eats.

If the arguments are not valid, the program prints the error message in red
on standard output and exits with status 1.

## Library use

```python
import sys

from philo.parsing import parse_input
from philo.simulation import run

settings = parse_input(["4", "410", "200", "200", "3"])
table = run(settings, sys.stdout)
print([philo.meal_count for philo in table.philos])
```

`parse_input` takes the arguments that follow the program name, four or five
of them, and returns a `philo.parsing.Settings`. It raises
`philo.parsing.InputError`, a `ValueError`, when they are not valid.
`parse_number` parses a single value in the same way. `run` builds a
`philo.table.Table`, runs the threads until the simulation ends, and returns
the table.

The modules are:

- `philo.parsing`: `Settings`, `InputError`, `parse_number`, `parse_input`
- `philo.utils`: `get_time`, `precise_sleep`, `format_action`,
  `format_death`, `format_error`
- `philo.table`: `Fork`, `Philosopher`, `Table`, the shared state and its
  checks
- `philo.dinner`: the philosopher routine `dinner` and the `monitor`
- `philo.simulation`: `start_threads` and `run`
- `philo.cli`: `main`, the `philo` command