import logging

from . import utils
from .classify import count_stars
from .get import URL


log = logging.getLogger(__name__)


def get_stars(date, session, client=None):
    """
    How many stars (`Stars.ZERO`, `Stars.ONE` or `Stars.TWO`) the user has for the
    puzzle at date. Raises `PuzzleLockedError` if the puzzle isn't live yet.
    The inputs cache is not used.
    """
    if client is None:
        client = utils.http
    log.debug("fetching star info for day %s-%s", date.day, date.year)
    url = URL.format(year=date.year, day=date.day)
    body = client.get(url, token=session)
    return count_stars(body, day=date.day)
