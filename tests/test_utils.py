import time

from philo.utils import (
    GREEN,
    LIGHT_BLUE,
    RED,
    RST,
    format_action,
    format_death,
    format_error,
    get_time,
    precise_sleep,
)


def test_get_time_matches_wall_clock():
    before = int(time.time() * 1000)
    now = get_time()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_get_time_does_not_go_backwards():
    first = get_time()
    second = get_time()
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = get_time()
    precise_sleep(20)
    assert get_time() - start >= 20


def test_precise_sleep_zero_returns_quickly():
    start = get_time()
    precise_sleep(0)
    assert get_time() - start < 50


def test_format_action_layout():
    line = format_action(5, 2, "is eating")
    assert line == GREEN + "5 " + LIGHT_BLUE + "2 " + RST + "is eating"


def test_format_action_ends_with_message():
    assert format_action(0, 1, "has taken a fork").endswith(RST + "has taken a fork")


def test_format_death_layout():
    assert format_death(10, 3) == "10 3 died"


def test_format_error_wraps_in_red():
    assert format_error("Problem in malloc!") == RED + "Problem in malloc!" + RST