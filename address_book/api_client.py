#!/usr/bin/env python3

# ------------------------------------------------------------------------------------------
# --------------------- HTTP client for the RandomUser API ----------------------------------
# ------------------------------------------------------------------------------------------
import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import DecodeError, NetworkError
from .models import UserBatch, UserRecord

logger = logging.getLogger(__name__)

API_URL = "https://randomuser.me/api/"


def _get_json(api_url: str, params: Dict[str, Any], timeout: Optional[float]) -> Any:
    # Sends the GET and hands back the parsed body. Both failure kinds are translated
    # into our own exceptions so callers never need to know about requests.
    try:
        resp = requests.get(api_url, params=params, timeout=timeout)
        # If the server returned an error code (4xx/5xx), raise now instead of parsing an error page.
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"GET {api_url} failed: {exc}") from exc

    try:
        return resp.json()
    except ValueError as exc:
        # requests raises a ValueError subclass (JSONDecodeError) for a non-JSON body.
        raise DecodeError(f"response from {api_url} is not valid JSON") from exc


def _parse_results(data: Any) -> UserBatch:
    if not isinstance(data, dict):
        raise DecodeError("response body must be a JSON object")
    results = data.get("results")
    if not isinstance(results, list):
        raise DecodeError("response body has no 'results' array")
    return tuple(UserRecord.from_json(user) for user in results)


def fetch_batch(
    count: int,
    timeout: Optional[float] = None,
    api_url: Optional[str] = None,
) -> UserBatch:
    """
    Fetch `count` random users in a single request.

    `count` goes out as the `results` query parameter as-is: an oversized value is
    the remote service's problem, not ours. Raises NetworkError when the request cannot
    complete and DecodeError when the body is not the expected JSON shape.
    """
    url = api_url or API_URL
    data = _get_json(url, {"results": count}, timeout)
    users = _parse_results(data)
    logger.info("fetched %s users from %s", len(users), url)
    return users


def fetch_user(timeout: Optional[float] = None, api_url: Optional[str] = None) -> UserRecord:
    # One random user, no query parameters (the API's default batch of one).
    url = api_url or API_URL
    users = _parse_results(_get_json(url, {}, timeout))
    if not users:
        raise DecodeError("response 'results' array is empty")
    return users[0]


def raw_results(users: UserBatch) -> List[Dict[str, Any]]:
    # The batch as plain dicts, in order (what the API sent under "results").
    return [user.data for user in users]
