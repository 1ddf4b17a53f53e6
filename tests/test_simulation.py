import io

from philo.parsing import Settings
from philo.simulation import run, start_threads
from philo.table import Table


def test_run_ends_when_all_have_eaten_enough():
    out = io.StringIO()
    settings = Settings(
        philo_number=5, time_to_die=800, time_to_eat=60, time_to_sleep=60, limit_of_meals=2
    )
    table = run(settings, out)
    assert table.is_finished()
    assert all(philo.meal_count >= 2 for philo in table.philos)
    assert "died" not in out.getvalue()


def test_run_lone_philosopher_dies():
    out = io.StringIO()
    settings = Settings(philo_number=1, time_to_die=100, time_to_eat=60, time_to_sleep=60)
    table = run(settings, out)
    logged = out.getvalue().splitlines()
    assert table.is_finished()
    assert logged[0].endswith("has taken a fork")
    assert logged[-1].endswith(" 1 died")
    assert table.philos[0].meal_count == 0


def test_start_threads_joins_every_philosopher():
    out = io.StringIO()
    settings = Settings(
        philo_number=3, time_to_die=800, time_to_eat=60, time_to_sleep=60, limit_of_meals=1
    )
    table = Table(settings, out)
    start_threads(table)
    assert table.start_time > 0
    assert all(philo.thread is not None for philo in table.philos)
    assert not any(philo.thread.is_alive() for philo in table.philos)


def test_death_is_reported_once():
    out = io.StringIO()
    settings = Settings(
        philo_number=2, time_to_die=60, time_to_eat=200, time_to_sleep=60
    )
    table = run(settings, out)
    deaths = [line for line in out.getvalue().splitlines() if line.endswith("died")]
    assert table.is_finished()
    assert len(deaths) == 1