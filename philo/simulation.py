"""Starting and joining the threads of one simulation run."""

from __future__ import annotations

import threading
from typing import TextIO

from philo.dinner import dinner, monitor
from philo.parsing import Settings
from philo.table import Table


def start_threads(table: Table) -> None:
    """Run every philosopher and the monitor in their own threads and wait for them."""
    table.start()
    for philo in table.philos:
        philo.thread = threading.Thread(
            target=dinner, args=(philo,), name=f"philo-{philo.id}"
        )
        philo.thread.start()

    monitor_thread = threading.Thread(target=monitor, args=(table,), name="monitor")
    monitor_thread.start()

    for philo in table.philos:
        philo.thread.join()
    monitor_thread.join()


def run(settings: Settings, out: TextIO | None = None) -> Table:
    """Set up a table for ``settings``, run the simulation and return the table."""
    table = Table(settings, out)
    start_threads(table)
    return table