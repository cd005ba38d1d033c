"""Main client class and convenience functions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from ._http import error_message, parse_error_body, parse_json_body, send_request
from .auth import redact_token
from .config import ClientConfig
from .dataset import Dataset
from .exceptions import GagaraError

logger = logging.getLogger(__name__)

# File suffixes uploaded as Parquet by upload_file()
PARQUET_SUFFIXES = frozenset({".parquet", ".pq"})


@dataclass
class GagaraClient:
    """
    Client for the gagara ephemeral data service.

    Usage:
        client = GagaraClient(config=ClientConfig(base_url="https://gagara.example.com"))

        # Upload a CSV
        dataset = await client.upload(csv_bytes, "sales-data")

        # Query it
        rows = await dataset.query("SELECT * FROM dataset LIMIT 10")

        # Clean up
        await dataset.delete()

    A custom httpx transport may be supplied, e.g. ``httpx.MockTransport``
    in tests or ``httpx.AsyncHTTPTransport(proxy=...)``.
    """
    config: ClientConfig = field(default_factory=ClientConfig)
    transport: httpx.AsyncBaseTransport | None = None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def upload(
        self,
        data: bytes | bytearray | memoryview,
        name: str,
        format: str | None = None,
    ) -> Dataset:
        """
        Upload a dataset and get a handle for querying.

        Args:
            data: Raw file contents (CSV or Parquet bytes), sent unchanged
            name: Friendly name for the dataset
            format: "csv" or "parquet" (default: config.default_format).
                    Passed to the server as-is.

        Returns:
            Dataset handle bound to the token issued by the server

        Raises:
            GagaraError: The server rejected the upload or was unreachable
        """
        if format is None:
            format = self.config.default_format

        response = await send_request(
            self.config,
            self.transport,
            "POST",
            "/catalog",
            headers={
                "Content-Type": "application/octet-stream",
                "X-Gagara-Name": name,
                "X-Gagara-Format": format,
            },
            content=bytes(data),
        )

        if not response.is_success:
            body = parse_error_body(response)
            raise GagaraError(
                error_message(body, f"Upload failed: {response.status_code}"),
                response.status_code,
                body,
            )

        result = parse_json_body(response)
        token = result.get("token")
        if not isinstance(token, str):
            raise GagaraError("Upload response is missing a token", response.status_code, result)

        logger.info("Uploaded dataset %r (%s, %d bytes) as %s", name, format, len(data), redact_token(token))
        return Dataset(token, self.config, self.transport)

    async def upload_file(
        self,
        path: str | Path,
        name: str | None = None,
        format: str | None = None,
    ) -> Dataset:
        """
        Upload a file from disk.

        Args:
            path: Path to a CSV or Parquet file
            name: Friendly name (default: the file name without suffix)
            format: Upload format (default: "parquet" for .parquet/.pq files,
                    otherwise config.default_format)

        Returns:
            Dataset handle
        """
        path = Path(path)
        if format is None and path.suffix.lower() in PARQUET_SUFFIXES:
            format = "parquet"
        return await self.upload(path.read_bytes(), name or path.stem, format=format)

    def from_token(self, token: str) -> Dataset:
        """
        Reconnect to an existing dataset using a previously obtained token.

        This does NOT verify the dataset still exists. Call ``is_present()``
        on the returned Dataset if you need to check.
        """
        return Dataset(token, self.config, self.transport)

    async def health(self) -> bool:
        """Health check - verify the gagara server is reachable."""
        try:
            response = await send_request(self.config, self.transport, "GET", "/health")
        except Exception as e:
            logger.warning(f"Gagara health check failed: {e}")
            return False

        if not response.is_success:
            logger.warning(f"Gagara health check returned HTTP {response.status_code}")
            return False
        return True


# Module-level default client
_default_client: GagaraClient | None = None


def _get_client() -> GagaraClient:
    """Get or create the default client."""
    global _default_client
    if _default_client is None:
        _default_client = GagaraClient()
    return _default_client


async def upload(
    data: bytes | bytearray | memoryview,
    name: str,
    format: str | None = None,
) -> Dataset:
    """
    Upload a dataset using the default client.

    Usage:
        from gagara_client import upload
        ds = await upload(b"id,name\\n1,Alice", "users")
    """
    return await _get_client().upload(data, name, format=format)


async def upload_file(
    path: str | Path,
    name: str | None = None,
    format: str | None = None,
) -> Dataset:
    """Upload a file from disk using the default client."""
    return await _get_client().upload_file(path, name=name, format=format)


def from_token(token: str) -> Dataset:
    """
    Get a Dataset handle for a stored token using the default client.

    Usage:
        from gagara_client import from_token
        ds = from_token(saved_token)
        if await ds.is_present():
            rows = await ds.query("SELECT COUNT(*) AS n FROM dataset")
    """
    return _get_client().from_token(token)


async def health() -> bool:
    """Check the default server is reachable."""
    return await _get_client().health()
