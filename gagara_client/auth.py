"""Authentication helpers for the gagara client.

Gagara has no accounts: the dataset token issued on upload is the only
credential. Possession of the token is authorization.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Characters of a token kept visible in log output
_VISIBLE_PREFIX = 4


def get_auth_headers(token: str) -> dict[str, str]:
    """
    Get the Bearer Authorization header for a dataset token.

    Args:
        token: Capability token issued by the server

    Returns:
        {"Authorization": "Bearer <token>"}
    """
    if not token:
        logger.warning("Building auth headers for an empty dataset token")
    return {"Authorization": f"Bearer {token}"}


def redact_token(token: str) -> str:
    """Shorten a token for logging, e.g. ``abcd…``."""
    if len(token) <= _VISIBLE_PREFIX:
        return "…"
    return f"{token[:_VISIBLE_PREFIX]}…"
