"""The philosopher routine and the monitor that watches over the table."""

from __future__ import annotations

import time

from philo.table import Philosopher, Table
from philo.utils import precise_sleep

_MONITOR_INTERVAL_SECONDS = 0.001
_LONE_FORK_POLL_MS = 1


def stagger_start(philo: Philosopher) -> None:
    """Delay even-numbered philosophers so neighbours do not grab forks together."""
    if philo.id % 2 == 0:
        precise_sleep(philo.table.settings.time_to_eat // 2)


def _wait_for_end(table: Table) -> None:
    while not table.is_finished():
        precise_sleep(_LONE_FORK_POLL_MS)


def philo_eat(philo: Philosopher) -> bool:
    """Take both forks, eat, and put them back.

    Returns False when only one fork exists: the philosopher holds it until
    the simulation ends and never eats.
    """
    table = philo.table
    with philo.left_fork.lock:
        table.print_action(philo, "has taken a fork")
        if philo.right_fork is philo.left_fork:
            _wait_for_end(table)
            return False
        with philo.right_fork.lock:
            table.print_action(philo, "has taken a fork")
            table.record_meal(philo)
            table.print_action(philo, "is eating")
            precise_sleep(table.settings.time_to_eat)
    return True


def sleep_and_think(philo: Philosopher) -> None:
    """Sleep for the configured time, then start thinking."""
    table = philo.table
    table.print_action(philo, "is sleeping")
    precise_sleep(table.settings.time_to_sleep)
    table.print_action(philo, "is thinking")


def dinner(philo: Philosopher) -> None:
    """Eat, sleep and think until the simulation ends or the philosopher is full."""
    table = philo.table
    stagger_start(philo)
    while not table.is_finished():
        philo_eat(philo)
        if table.check_full_after_meal(philo):
            break
        sleep_and_think(philo)


def monitor(table: Table) -> None:
    """Poll the table until someone starves or everyone has eaten enough."""
    while not table.check_death() and not table.check_full():
        time.sleep(_MONITOR_INTERVAL_SECONDS)