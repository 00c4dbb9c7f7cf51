"""
Classification of adventofcode.com response bodies.

The site serves html meant for humans, and the status code is not a reliable
signal, so responses are recognised by substrings of the body. All of the
substrings live in the tables below - when the site wording changes, this is
the only place that needs updating. The first matching probe wins.
"""

from __future__ import annotations

import enum
import logging

from .exceptions import DeadTokenError
from .exceptions import FetchError
from .exceptions import PuzzleLockedError
from .exceptions import ServerError
from .exceptions import ServiceUnavailableError

log = logging.getLogger(__name__)


class Stars(enum.IntEnum):
    """How many stars the user has for a puzzle"""

    ZERO = 0
    ONE = 1
    TWO = 2


NOT_LIVE_PROBES = ("Please don't repeatedly request", "Not Found")
NOT_LIVE_MESSAGE = "Puzzle for day {day} is not live yet"

# (substrings, exception type, message)
INPUT_PROBES: list[tuple[tuple[str, ...], type[FetchError], str]] = [
    (("Service Unavailable",), ServiceUnavailableError, "Advent of Code is dead"),
    (NOT_LIVE_PROBES, PuzzleLockedError, NOT_LIVE_MESSAGE),
    (("log in",), DeadTokenError, "Session cookie is invalid"),
    (
        ("Internal Server Error",),
        ServerError,
        "Internal Server Error, invalid session cookie perhaps?",
    ),
]

# checked after the not-live probe, so that a locked puzzle is never zero stars
STAR_PROBES: list[tuple[str, Stars]] = [
    ("The first half of this puzzle is complete!", Stars.ONE),
    ("Both parts of this puzzle are complete!", Stars.TWO),
]

SENTINELS = tuple(s for substrings, _, _ in INPUT_PROBES for s in substrings)


def check_input(body: str, day) -> str:
    """
    Returns the body unchanged if it looks like a puzzle input.
    Raises the matching `FetchError` subclass otherwise.
    """
    for substrings, exc_type, message in INPUT_PROBES:
        for substring in substrings:
            if substring in body:
                log.debug("input body matched %r", substring)
                raise exc_type(message.format(day=day))
    return body


def count_stars(body: str, day) -> Stars:
    """Number of stars shown on a puzzle page."""
    for substring in NOT_LIVE_PROBES:
        if substring in body:
            log.debug("puzzle page matched %r", substring)
            raise PuzzleLockedError(NOT_LIVE_MESSAGE.format(day=day))
    for substring, stars in STAR_PROBES:
        if substring in body:
            return stars
    return Stars.ZERO
