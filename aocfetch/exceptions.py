class AocError(Exception):
    """base exception for this package"""


class FetchError(AocError):
    """getting a puzzle input or puzzle page failed"""


class TransportError(FetchError):
    """the GET request could not be sent, or the body could not be decoded"""


class ServiceUnavailableError(FetchError):
    """adventofcode.com is down"""


class PuzzleLockedError(FetchError):
    """trying to access input before the unlock"""


class DeadTokenError(FetchError):
    """the auth is expired/incorrect"""


class ServerError(FetchError):
    """the server responded with an internal server error page"""


class CacheError(FetchError):
    """reading or writing the local inputs directory failed"""


class MissingSessionError(FetchError):
    """no session token was found in the environment"""


class InputParseError(AocError, ValueError):
    """a token of the puzzle input could not be parsed into the requested type"""
