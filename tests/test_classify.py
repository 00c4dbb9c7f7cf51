import pytest

from aocfetch.classify import check_input
from aocfetch.classify import count_stars
from aocfetch.classify import Stars
from aocfetch.exceptions import DeadTokenError
from aocfetch.exceptions import PuzzleLockedError
from aocfetch.exceptions import ServerError
from aocfetch.exceptions import ServiceUnavailableError


def test_plain_input_passes_through():
    body = "+1\n-2\n+3\n"
    assert check_input(body, day="1") is body


@pytest.mark.parametrize(
    "body, expected",
    [
        ("Service Unavailable", ServiceUnavailableError("Advent of Code is dead")),
        ("404 Not Found", PuzzleLockedError("Puzzle for day 7 is not live yet")),
        ("Please don't repeatedly request this endpoint", PuzzleLockedError("Puzzle for day 7 is not live yet")),
        ("Please log in to get your puzzle input.", DeadTokenError("Session cookie is invalid")),
        ("500 Internal Server Error", ServerError("Internal Server Error, invalid session cookie perhaps?")),
    ],
)
def test_input_probes(body, expected):
    with pytest.raises(expected):
        check_input(body, day="7")


@pytest.mark.parametrize(
    "body, expected",
    [
        ("Service Unavailable ... Not Found ... log in", ServiceUnavailableError),
        ("Not Found ... log in ... Internal Server Error", PuzzleLockedError),
        ("Internal Server Error ... log in", DeadTokenError),
    ],
)
def test_first_matching_probe_wins(body, expected):
    with pytest.raises(expected):
        check_input(body, day="1")


def test_probes_are_case_sensitive():
    assert check_input("not found, Log In", day="1") == "not found, Log In"


def test_not_live_beats_stars():
    body = "Not Found. Both parts of this puzzle are complete!"
    with pytest.raises(PuzzleLockedError("Puzzle for day 3 is not live yet")):
        count_stars(body, day="3")


@pytest.mark.parametrize(
    "body",
    ["Service Unavailable", "Please log in", "Internal Server Error", ""],
)
def test_star_page_ignores_other_probes(body):
    assert count_stars(body, day="1") is Stars.ZERO


def test_star_counts():
    assert count_stars("The first half of this puzzle is complete!", day="1") is Stars.ONE
    assert count_stars("Both parts of this puzzle are complete!", day="1") is Stars.TWO
