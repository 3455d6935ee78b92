"""Shared HTTP helpers used by the metadata and project clients.

Encapsulates request/timeout error handling so registry modules avoid
duplicating try/except blocks. Each call is a single blocking GET: no retries
and no caching.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests
import urllib3

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


def safe_get(
    url: str,
    *,
    context: str,
    insecure: bool = False,
    timeout: float = Constants.REQUEST_TIMEOUT,
    **kwargs: Any,
) -> requests.Response:
    """Perform a GET request with consistent error handling and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "boot", "starter").
        insecure: Skip TLS certificate verification.
        timeout: Request timeout in seconds.
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object (always 2xx).

    Raises:
        NetworkError: On transport failures and non-2xx responses.
    """
    safe_target = safe_url(url)
    if insecure:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context,
                ),
            )
        try:
            res = requests.get(url, timeout=timeout, verify=not insecure, **kwargs)
        except requests.Timeout as exc:
            logger.error("%s request timed out after %s seconds", context, timeout)
            raise NetworkError(safe_target, f"timed out after {timeout} seconds") from exc
        except requests.RequestException as exc:  # includes ConnectionError and SSLError
            logger.error("%s connection error: %s", context, exc)
            raise NetworkError(safe_target, str(exc)) from exc

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                outcome="success" if res.ok else "http_error",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
                context=context,
            ),
        )
    if not res.ok:
        raise NetworkError(safe_target, res.reason or "unexpected status", res.status_code)
    return res


def get_json(
    url: str,
    *,
    context: str,
    insecure: bool = False,
    timeout: float = Constants.REQUEST_TIMEOUT,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """Perform a GET request and decode the JSON body.

    Raises:
        NetworkError: When the request fails.
        ParseError: When the body is not JSON.
    """
    res = safe_get(url, context=context, insecure=insecure, timeout=timeout, headers=headers)
    try:
        return json.loads(res.text)
    except json.JSONDecodeError as exc:
        if is_debug_enabled(logger):
            logger.debug(
                "JSON decode error",
                extra=extra_context(
                    event="parse",
                    component="http_client",
                    action="get_json",
                    outcome="json_decode_error",
                    status_code=res.status_code,
                    target=safe_url(url),
                ),
            )
        raise ParseError(f"{context} metadata", f"response is not JSON: {exc}") from exc
