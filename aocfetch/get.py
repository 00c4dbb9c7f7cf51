import logging
import os
import sys
from textwrap import dedent

from . import cache
from . import utils
from .classify import check_input
from .exceptions import MissingSessionError
from .models import Input
from .utils import colored
from .utils import sanitized


log = logging.getLogger(__name__)


URL = "https://adventofcode.com/{year}/day/{day}"


def fetch_input(day, year, session, client=None):
    """
    Get the input for day and year from the server, bypassing the local cache.
    User's session cookie (str) is needed - puzzle inputs differ by user.
    Raises a `FetchError` subclass if the response is not a puzzle input.
    """
    if client is None:
        client = utils.http
    log.info("fetching input for day %s-%s token=%s", day, year, sanitized(session))
    url = URL.format(year=year, day=day) + "/input"
    body = client.get(url, token=session)
    return Input(year, day, check_input(body, day=day))


def load_or_fetch_input(day, year, client=None):
    """
    Get the input for day and year, from the inputs directory if it was cached
    there before, otherwise from the server (and then cached). The session token
    is taken from the AOC_SESSION environment variable, only when a fetch is needed.
    """
    path = cache.input_path(year, day)
    if path.exists():
        log.info("loading input for day %s-%s from %s", day, year, path)
        return Input(year, day, cache.load_input(year, day))
    log.debug("input cache miss %s", path)
    session = get_session()
    puzzle_input = fetch_input(day, year, session, client=client)
    puzzle_input.save_to_file()
    return puzzle_input


def get_session():
    """
    The user's session token, from the environment. Read fresh on every call.
    Raises `MissingSessionError` with a diagnostic on stderr if it isn't set.
    """
    token = os.getenv("AOC_SESSION")
    if token:
        return token
    msg = dedent(
        """\
        ERROR: AoC session ID is needed to get your puzzle data!
        You can find it in your browser cookies after login.
        Export the cookie in environment variable AOC_SESSION
        """
    )
    print(colored(msg, color="red"), file=sys.stderr)
    raise MissingSessionError("Missing session ID")
