from __future__ import annotations

import logging
import os
import platform
import typing as t
from pathlib import Path
from tempfile import NamedTemporaryFile

import urllib3

from .exceptions import TransportError

log: logging.Logger = logging.getLogger(__name__)


class HttpClient:
    # every request to adventofcode.com goes through this wrapper so that the
    # session cookie is attached in one place and the transport can be swapped
    # out (pass client=... to the public functions).

    pool_manager: urllib3.PoolManager
    req_count: dict[t.Literal["GET"], int]

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url)
        else:
            self.pool_manager = urllib3.PoolManager()
        self.req_count = {"GET": 0}

    def get(self, url: str, token: str) -> str:
        """
        GET the url with the session cookie and return the response body as text.
        The status code is not inspected - the body is what gets classified.
        """
        headers = {"Cookie": f"session={token}"}
        try:
            resp = self.pool_manager.request(
                "GET", url, headers=headers, preload_content=False
            )
        except urllib3.exceptions.HTTPError as err:
            log.debug("GET %s failed: %s %s", url, type(err).__name__, err)
            raise TransportError("Error sending GET request") from err
        finally:
            self.req_count["GET"] += 1
        log.debug("got %s status code from %s", resp.status, url)
        # reading the body happens here, so a dropped connection mid-body is a
        # conversion failure rather than a send failure
        try:
            return resp.data.decode("utf-8")
        except (urllib3.exceptions.HTTPError, UnicodeDecodeError) as err:
            log.debug("reading body from %s failed: %s %s", url, type(err).__name__, err)
            raise TransportError("Error converting input to string") from err
        finally:
            resp.release_conn()


http: HttpClient = HttpClient()


def sanitized(token: str) -> str:
    # never log a whole session token
    return "..." + token[-4:]


def atomic_write_file(path: Path, contents_str: str) -> None:
    """
    Atomically write a string to a file by writing it to a temporary file, and then
    renaming it to the final destination name. This solves a race condition where existence
    of a file doesn't necessarily mean the content is valid yet.
    The parent directory must already exist. The tempfile is removed if anything fails.
    """
    f = NamedTemporaryFile("w", dir=path.parent, encoding="utf-8", newline="", delete=False)
    try:
        with f:
            log.debug("writing to tempfile @ %s", f.name)
            f.write(contents_str)
        log.debug("moving %s -> %s", f.name, path)
        os.replace(f.name, path)
    except BaseException:
        Path(f.name).unlink(missing_ok=True)
        raise


_ANSIColor = t.Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
]
_ansi_colors = t.get_args(_ANSIColor)
if platform.system() == "Windows":
    os.system("color")  # hack - makes ANSI colors work in the windows cmd window


def colored(txt: str, color: _ANSIColor | None) -> str:
    if color is None:
        return txt
    code = _ansi_colors.index(color.casefold())
    reset = "\x1b[0m"
    return f"\x1b[{code + 30}m{txt}{reset}"
