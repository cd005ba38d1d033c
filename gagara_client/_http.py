"""Internal request helpers shared by GagaraClient and Dataset."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from .config import ClientConfig
from .exceptions import GagaraError

logger = logging.getLogger(__name__)


async def send_request(
    config: ClientConfig,
    transport: httpx.AsyncBaseTransport | None,
    method: str,
    path: str,
    *,
    headers: dict[str, str] | None = None,
    content: bytes | None = None,
    json: Any = None,
    log_path: str | None = None,
) -> httpx.Response:
    """
    Issue a single request against the gagara service.

    The whole exchange is bounded by ``config.timeout``. The underlying
    httpx client and the timeout are released on every exit path.

    Args:
        config: Client configuration (base URL, timeout)
        transport: Optional httpx transport; None uses httpx's default
        method: HTTP method
        path: Path relative to the base URL, starting with "/"
        headers: Extra request headers
        content: Raw request body
        json: JSON request body
        log_path: Path to show in log lines instead of ``path``

    Returns:
        The response, whatever its status code

    Raises:
        GagaraError: The request timed out or the transport failed
    """
    url = f"{config.base_url}{path}"
    shown = f"{config.base_url}{log_path or path}"
    logger.debug("%s %s", method, shown)

    try:
        async with httpx.AsyncClient(timeout=config.timeout, transport=transport) as http_client:
            response = await asyncio.wait_for(
                http_client.request(method, url, headers=headers, content=content, json=json),
                timeout=config.timeout,
            )
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise GagaraError(f"Request to {shown} timed out after {config.timeout}s") from exc
    except httpx.HTTPError as exc:
        raise GagaraError(f"Request to {shown} failed: {exc}") from exc

    logger.debug("%s %s -> %d", method, shown, response.status_code)
    return response


def parse_error_body(response: httpx.Response) -> dict[str, Any] | None:
    """Parse an error response body, returning None if it is empty or not a JSON object."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def error_message(body: dict[str, Any] | None, default: str) -> str:
    """The server's ``error`` text when present, else ``default``."""
    if body and body.get("error"):
        return str(body["error"])
    return default


def parse_json_body(response: httpx.Response) -> dict[str, Any]:
    """
    Parse a successful response body as a JSON object.

    Raises:
        GagaraError: The body is not a JSON object
    """
    try:
        data = response.json()
    except ValueError as exc:
        raise GagaraError(
            f"Malformed response from server (HTTP {response.status_code})",
            response.status_code,
        ) from exc
    if not isinstance(data, dict):
        raise GagaraError(
            f"Unexpected response from server (HTTP {response.status_code})",
            response.status_code,
        )
    return data
