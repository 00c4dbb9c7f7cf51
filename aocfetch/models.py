from typing import NamedTuple

from . import transforms
from .cache import save_input
from .classify import Stars


__all__ = ["Date", "Input", "Stars"]


class Date(NamedTuple):
    """
    A puzzle, identified by day and year, e.g. ``Date("1", "2018")``. Values are
    used verbatim in urls and filenames, nothing is range-checked.
    """

    day: str
    year: str


class Input(NamedTuple):
    """
    The puzzle input text for (year, day). The body is kept exactly as the server
    returned it, including the trailing newline.
    """

    year: str
    day: str
    body: str

    def __str__(self):
        return self.body

    def save_to_file(self):
        """Cache this input under the inputs directory, replacing any existing file."""
        return save_input(self.year, self.day, self.body)

    def split(self, type=str):
        """
        Whitespace-separated tokens of the body, each parsed with `type`.
        Raises `InputParseError` if any token can't be parsed.

            >>> Input("2020", "1", "1 2 3\\n").split(int)
            [1, 2, 3]
        """
        return transforms.split(self.body, type=type)

    def split_by(self, delim, type=str):
        """
        Tokens between every occurrence of `delim`, each parsed with `type`.
        Empty tokens are kept, so n delimiters always give n + 1 tokens.
        """
        return transforms.split_by(self.body, delim, type=type)

    def lines(self):
        return transforms.lines(self.body)
