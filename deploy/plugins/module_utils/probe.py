from __future__ import annotations

import enum
import math
import time

from ansible.module_utils.urls import open_url, ConnectionError
from ansible.module_utils.six.moves.urllib.error import HTTPError
from http.client import HTTPException

from .display import Display
from .errors import NotFound
from typing import Callable

display = Display()

RETRY_INTERVAL = 3

# Netlify answers 401 for password-protected deploys, which are published.
AUTH_CHALLENGE_STATUS = 401

# ValueError and TypeError come from urllib on a malformed or missing URL.
PROBE_ERRORS = (OSError, ConnectionError, HTTPException, ValueError, TypeError)


class ProbeResult(enum.Enum):
    REACHABLE = 'reachable'
    EXHAUSTED_RETRIES = 'exhausted_retries'


def classify_response(status: int) -> bool:
    """Whether an HTTP status means the site is up."""
    if status == AUTH_CHALLENGE_STATUS:
        return True
    return 200 <= status < 400


def fetch_url(url: str, timeout: int = 10) -> int:
    """Plain GET without credentials, returning the HTTP status.

    HTTP errors carrying a status that classify_response accepts are turned
    into a normal return here; every other failure propagates.
    """
    try:
        response = open_url(url, method='GET', timeout=timeout)
    except HTTPError as e:
        if classify_response(e.code):
            return e.code
        raise
    return response.getcode()


def wait_for_url(url: str, max_timeout: int, check_only_once: bool = False,
                 fetch: Callable[[str], int] = fetch_url,
                 sleep: Callable[[float], None] = time.sleep) -> ProbeResult:
    """Probes `url` every few seconds until it answers.

    With `check_only_once` the first failure raises NotFound. Otherwise
    running out of attempts is returned as EXHAUSTED_RETRIES rather than
    raised, and the caller decides how to report it.
    """
    attempts = math.ceil(max_timeout / RETRY_INTERVAL)
    for _ in range(attempts):
        try:
            fetch(url)
            return ProbeResult.REACHABLE
        except PROBE_ERRORS as e:
            display.v(f"Probe of {url} failed: {e}")
            if check_only_once:
                raise NotFound("not found")
            display.info(f"URL {url} unavailable, retrying...")
            sleep(RETRY_INTERVAL)
    return ProbeResult.EXHAUSTED_RETRIES
