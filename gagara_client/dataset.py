"""Dataset handle: queries, introspection and lifecycle for one uploaded dataset."""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from ._http import error_message, parse_error_body, parse_json_body, send_request
from .auth import get_auth_headers, redact_token
from .config import ClientConfig
from .exceptions import DatasetNotFoundError, GagaraError, QueryError
from .models import DatasetMeta, QueryResult, SchemaColumn, project_rows

logger = logging.getLogger(__name__)


class Dataset:
    """
    Handle to an uploaded dataset.

    Carries the capability token and the connection settings of the client
    that created it. Every method is a fresh round trip to the server; the
    handle itself holds no server state and is never invalidated locally.

    Usage:
        ds = await client.upload(b"id,name\\n1,Alice\\n2,Bob", "users")

        rows = await ds.query("SELECT * FROM dataset ORDER BY id")
        columns = await ds.schema()

        await ds.rename("people")
        await ds.delete()
    """

    def __init__(
        self,
        token: str,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Create a Dataset handle. Usually obtained via GagaraClient.

        Args:
            token: Capability token for this dataset
            config: Client configuration (base URL, timeout)
            transport: Optional httpx transport shared with the client
        """
        self._token = token
        self._config = config
        self._transport = transport

    @property
    def token(self) -> str:
        """Capability token for this dataset."""
        return self._token

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def __repr__(self) -> str:
        return f"Dataset(token={redact_token(self._token)!r}, base_url={self.base_url!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return (self._token, self.base_url) == (other._token, other.base_url)

    def __hash__(self) -> int:
        return hash((self._token, self.base_url))

    # ----------------------------------------------------------
    # Query
    # ----------------------------------------------------------

    async def query(
        self,
        sql: str,
        row_type: Callable[..., Any] | None = None,
    ) -> list[Any]:
        """
        Execute a SQL query against this dataset and return the rows.

        Use ``dataset`` as the table name in your SQL.

        Args:
            sql: SQL statement
            row_type: Optional callable each row is passed to as keyword
                      arguments, e.g. a dataclass with matching fields

        Returns:
            Rows as dicts keyed by column name (or ``row_type`` instances)

        Raises:
            DatasetNotFoundError: The token is unknown to the server
            QueryError: The server rejected or failed the query
        """
        data = await self._run_query(sql)
        return project_rows(data["rows"], row_type)

    async def query_full(
        self,
        sql: str,
        row_type: Callable[..., Any] | None = None,
    ) -> QueryResult:
        """Execute a query and return the full response including column names."""
        data = await self._run_query(sql)
        return QueryResult.from_dict(data, row_type)

    async def _run_query(self, sql: str) -> dict[str, Any]:
        response = await self._request(
            "POST",
            "/query",
            headers={"Content-Type": "application/json", **get_auth_headers(self._token)},
            json={"sql": sql},
        )

        if not response.is_success:
            body = parse_error_body(response)
            if response.status_code == 404:
                raise DatasetNotFoundError(self._token, body)
            raise QueryError(error_message(body, "Query failed"), body, response.status_code)

        data = parse_json_body(response)
        if "rows" not in data or "columns" not in data:
            raise GagaraError("Query response is missing columns or rows", response.status_code, data)
        return data

    # ----------------------------------------------------------
    # Introspection
    # ----------------------------------------------------------

    async def schema(self) -> list[SchemaColumn]:
        """Get column schema (names, types, nullability)."""
        response = await self._catalog_request("GET", "/schema")
        self._check(response, "Failed to get schema")
        data = parse_json_body(response)
        columns = data.get("columns")
        if not isinstance(columns, list):
            raise GagaraError("Unexpected response from server", response.status_code, data)
        try:
            return [SchemaColumn.from_dict(c) for c in columns]
        except (KeyError, TypeError) as exc:
            raise GagaraError("Unexpected response from server", response.status_code, data) from exc

    async def meta(self) -> DatasetMeta:
        """Get dataset metadata: row count, file size, column sizes."""
        response = await self._catalog_request("GET", "/meta")
        self._check(response, "Failed to get metadata")
        data = parse_json_body(response)
        try:
            return DatasetMeta.from_dict(data)
        except (KeyError, TypeError) as exc:
            raise GagaraError("Unexpected response from server", response.status_code, data) from exc

    async def is_present(self) -> bool:
        """
        Check if this dataset still exists on the server.

        Useful for long-lived tokens across server restarts. A gone dataset
        is reported by the server as ``{"isPresent": false}``. Unlike every
        other dataset call, a 404 here is not mapped to DatasetNotFoundError;
        any non-2xx status raises GagaraError.
        """
        response = await self._catalog_request("GET", "/is-present")

        if not response.is_success:
            raise GagaraError(
                "Failed to check presence",
                response.status_code,
                parse_error_body(response),
            )

        data = parse_json_body(response)
        present = data.get("isPresent")
        if not isinstance(present, bool):
            raise GagaraError("Unexpected response from server", response.status_code, data)
        return present

    # ----------------------------------------------------------
    # Lifecycle
    # ----------------------------------------------------------

    async def rename(self, new_name: str) -> None:
        """Rename this dataset (updates the friendly name only; the token is unchanged)."""
        response = await self._catalog_request(
            "POST",
            "/rename",
            headers={"Content-Type": "application/json"},
            json={"new_name": new_name},
        )
        self._check(response, "Failed to rename")
        logger.info("Renamed dataset %s to %r", redact_token(self._token), new_name)

    async def delete(self) -> None:
        """
        Delete this dataset from the server.

        The handle stays usable as an object, but further calls fail with
        DatasetNotFoundError once the server has dropped the dataset.
        """
        response = await self._catalog_request("DELETE", "")
        self._check(response, "Failed to delete")
        logger.info("Deleted dataset %s", redact_token(self._token))

    # ----------------------------------------------------------
    # Internal
    # ----------------------------------------------------------

    async def _catalog_request(self, method: str, suffix: str, **kwargs: Any) -> httpx.Response:
        return await self._request(
            method,
            f"/catalog/{self._token}{suffix}",
            log_path=f"/catalog/{redact_token(self._token)}{suffix}",
            **kwargs,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        return await send_request(self._config, self._transport, method, path, **kwargs)

    def _check(self, response: httpx.Response, message: str) -> None:
        """Raise the error matching a non-2xx catalog response."""
        if response.is_success:
            return
        body = parse_error_body(response)
        if response.status_code == 404:
            raise DatasetNotFoundError(self._token, body)
        raise GagaraError(message, response.status_code, body)
