"""Blocking HTTP helper shared by the fetchers"""

import logging
from typing import Any, Dict, Optional

import httpx

from surf_log_common import ParseError

logger = logging.getLogger(__name__)


def http_get(
    url: str,
    params: Optional[Dict] = None,
    timeout: float = 30.0,
    client: Optional[httpx.Client] = None,
) -> httpx.Response:
    """GET a URL and raise for non-2xx responses

    Args:
        url: Endpoint to request
        params: Query parameters
        timeout: Timeout in seconds when a temporary client is created
        client: Optional caller-owned client; a temporary one is used otherwise

    Returns:
        The successful response

    Raises:
        httpx.HTTPStatusError: On 4xx/5xx responses
        httpx.RequestError: On connection failures and timeouts
    """
    if client is None:
        with httpx.Client(timeout=timeout) as temp_client:
            return http_get(url, params=params, client=temp_client)

    response = client.get(url, params=params)
    logger.debug(f"GET {response.url} -> {response.status_code}")
    response.raise_for_status()
    return response


def decode_json(response: httpx.Response, what: str) -> Any:
    """Decode a JSON body

    Raises:
        ParseError: If the body is not JSON (e.g. an HTML maintenance page)
    """
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Malformed {what} response: {e}") from e
