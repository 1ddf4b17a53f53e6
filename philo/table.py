"""Shared simulation state: forks, philosophers and the table that owns them."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import TextIO

from philo.parsing import Settings
from philo.utils import format_action, format_death, get_time


@dataclass
class Fork:
    """A fork guarded by its own lock."""

    fork_id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


@dataclass(eq=False)
class Philosopher:
    """One diner; mutable fields are guarded by the table's data lock."""

    id: int
    table: "Table" = field(repr=False)
    left_fork: Fork
    right_fork: Fork
    is_full: bool = False
    meal_count: int = 0
    last_meal_time: int = 0
    thread: threading.Thread | None = field(default=None, repr=False)


class Table:
    """Holds the settings, forks and philosophers of one simulation."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = 0
        self._finished = False
        self._data_lock = threading.Lock()
        self._print_lock = threading.Lock()

        count = settings.philo_number
        self.forks = [Fork(fork_id=i) for i in range(count)]
        self.philos = [
            Philosopher(
                id=i + 1,
                table=self,
                left_fork=self.forks[i],
                right_fork=self.forks[(i + 1) % count],
            )
            for i in range(count)
        ]

    def is_finished(self) -> bool:
        """Return whether the simulation has ended."""
        with self._data_lock:
            return self._finished

    def finish(self) -> None:
        """Mark the simulation as ended."""
        with self._data_lock:
            self._finished = True

    def start(self) -> int:
        """Record the start time and reset every philosopher's last meal to it."""
        self.start_time = get_time()
        with self._data_lock:
            for philo in self.philos:
                philo.last_meal_time = self.start_time
        return self.start_time

    def _write(self, line: str) -> None:
        with self._print_lock:
            self.out.write(line + "\n")
            self.out.flush()

    def print_action(self, philo: Philosopher, message: str) -> None:
        """Log an action unless the simulation has already ended."""
        with self._data_lock:
            if self._finished:
                return
            timestamp = get_time() - self.start_time
        self._write(format_action(timestamp, philo.id, message))

    def record_meal(self, philo: Philosopher) -> None:
        """Note that ``philo`` has started a meal now."""
        with self._data_lock:
            philo.last_meal_time = get_time()
            philo.meal_count += 1

    def check_full_after_meal(self, philo: Philosopher) -> bool:
        """Mark ``philo`` full and return True once it reached the meal limit."""
        limit = self.settings.limit_of_meals
        if limit <= 0:
            return False
        with self._data_lock:
            if philo.meal_count >= limit:
                philo.is_full = True
                return True
        return False

    def check_death(self) -> bool:
        """End the simulation and report the first philosopher that starved."""
        with self._data_lock:
            dead = next(
                (
                    philo
                    for philo in self.philos
                    if get_time() - philo.last_meal_time > self.settings.time_to_die
                ),
                None,
            )
            if dead is None:
                return False
            self._finished = True
        self._write(format_death(get_time() - self.start_time, dead.id))
        return True

    def check_full(self) -> bool:
        """End the simulation and return True when everyone reached the limit."""
        limit = self.settings.limit_of_meals
        if limit <= 0:
            return False
        with self._data_lock:
            all_full = all(philo.meal_count >= limit for philo in self.philos)
            if all_full:
                self._finished = True
        return all_full