"""
Single GET against an upstream source, returning the decoded JSON body.
Timeout comes from PUZZLE_HTTP_TIMEOUT (seconds, default 8).
"""

import logging
import os
from typing import Any

import requests

from api.errors import DecodeFailure, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 8.0


def _timeout() -> float:
    raw = os.environ.get("PUZZLE_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid PUZZLE_HTTP_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def get_json(url: str, *, timeout: float | None = None) -> Any:
    """
    GET url and decode the body as JSON.

    Raises:
        TransportFailure: request error, timeout, or non-2xx status.
        DecodeFailure: body is not JSON.
    """
    try:
        resp = requests.get(url, timeout=timeout or _timeout())
    except requests.RequestException as e:
        raise TransportFailure(f"GET {url} failed: {e}") from e
    if not 200 <= resp.status_code < 300:
        raise TransportFailure(f"GET {url} returned status {resp.status_code}")
    try:
        return resp.json()
    except (ValueError, RecursionError) as e:
        raise DecodeFailure(f"GET {url} returned undecodable body: {e}") from e
