import pytest

from philo.cli import main
from philo.parsing import USAGE
from philo.utils import format_error


@pytest.mark.parametrize("argv", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == format_error(USAGE) + "\n"


def test_negative_value_rejected(capsys):
    assert main(["-5", "800", "200", "200"]) == 1
    assert capsys.readouterr().out == format_error("Feed me only positive values") + "\n"


def test_short_timestamp_rejected(capsys):
    assert main(["5", "800", "50", "200"]) == 1
    assert capsys.readouterr().out == format_error("Use timestamps major than 60ms") + "\n"


def test_non_digit_rejected(capsys):
    assert main(["five", "800", "200", "200"]) == 1
    assert "The input is not a correct digit" in capsys.readouterr().out


def test_lone_philosopher_run_reports_death(capsys):
    assert main(["1", "100", "60", "60"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1].endswith(" 1 died")


def test_meal_limit_run_finishes_without_death(capsys):
    assert main(["3", "800", "60", "60", "1"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    assert out.count("is eating") >= 3