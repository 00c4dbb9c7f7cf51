from . import cache
from . import classify
from . import exceptions
from . import get
from . import models
from . import stars
from . import transforms
from . import utils
from .cache import input_path
from .exceptions import AocError
from .exceptions import CacheError
from .exceptions import DeadTokenError
from .exceptions import FetchError
from .exceptions import InputParseError
from .exceptions import MissingSessionError
from .exceptions import PuzzleLockedError
from .exceptions import ServerError
from .exceptions import ServiceUnavailableError
from .exceptions import TransportError
from .get import fetch_input
from .get import load_or_fetch_input
from .models import Date
from .models import Input
from .models import Stars
from .stars import get_stars
from .version import __version__

__all__ = [
    "AocError",
    "CacheError",
    "Date",
    "DeadTokenError",
    "FetchError",
    "Input",
    "InputParseError",
    "MissingSessionError",
    "PuzzleLockedError",
    "ServerError",
    "ServiceUnavailableError",
    "Stars",
    "TransportError",
    "__version__",
    "cache",
    "classify",
    "exceptions",
    "fetch_input",
    "get",
    "get_stars",
    "input_path",
    "load_or_fetch_input",
    "models",
    "stars",
    "transforms",
    "utils",
]
