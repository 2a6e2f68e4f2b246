import re

import pytest

from puzzlekit.simulations import Helpdesk, bathtub_fill_time, helpdesk_summary


def to_seconds(text):
    hours, minutes, seconds = map(int, text.split(":"))
    return hours * 3600 + minutes * 60 + seconds


def test_single_counter_without_breaks():
    assert helpdesk_summary(100, [1.0], [5, 5, 5]) == ([3], [0])


def test_single_counter_takes_breaks():
    assert helpdesk_summary(5, [1.0], [10, 10, 10]) == ([3], [2])


def test_tied_counters_choose_first_then_other():
    desk = Helpdesk(100, [1.0, 1.0])
    assert desk.serve(10) == 0
    assert desk.serve(10) == 1
    assert desk.visitors == [1, 1]


def test_every_visitor_is_served():
    times = [3, 7, 2, 9, 4, 4, 1, 8]
    visitors, breaks = helpdesk_summary(10, [1.0, 2.0, 0.5], times)
    assert sum(visitors) == len(times)
    assert len(breaks) == 3
    assert all(count >= 0 for count in breaks)


def test_faster_counter_serves_at_least_as_many():
    visitors, _ = helpdesk_summary(1000, [1.0, 4.0], [5] * 20)
    assert visitors[1] >= visitors[0]


@pytest.mark.parametrize("efficiencies", [[], [1.0, 0.0]])
def test_invalid_helpdesk(efficiencies):
    with pytest.raises(ValueError):
        Helpdesk(10, efficiencies)


def test_bathtub_without_leaks():
    assert bathtub_fill_time(1000, 60, 1, []) == "01:00:00"


def test_bathtub_leak_too_strong():
    assert bathtub_fill_time(1000, 60, 2, [(10, 2)]) == "Impossible, 10 cm."


def test_leak_slows_filling():
    plain = bathtub_fill_time(500, 40, 3, [])
    leaky = bathtub_fill_time(500, 40, 3, [(20, 1)])
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", leaky)
    assert to_seconds(leaky) > to_seconds(plain)


def test_leak_at_bottom_equals_lower_flow():
    assert bathtub_fill_time(800, 50, 3, [(0, 1)]) == bathtub_fill_time(800, 50, 2, [])


def test_leak_order_does_not_matter():
    leaks = [(30, 1), (10, 1), (20, 1)]
    assert bathtub_fill_time(700, 50, 5, leaks) == bathtub_fill_time(700, 50, 5, sorted(leaks))