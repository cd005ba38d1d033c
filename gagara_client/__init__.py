"""Python client for the gagara ephemeral data service.

Usage:
    from gagara_client import GagaraClient, ClientConfig

    client = GagaraClient(config=ClientConfig(base_url="http://localhost:3039"))
    ds = await client.upload(b"id,name\n1,Alice\n2,Bob", "users")
    rows = await ds.query("SELECT * FROM dataset")
"""

from .client import GagaraClient, from_token, health, upload, upload_file
from .config import ClientConfig
from .dataset import Dataset
from .exceptions import DatasetNotFoundError, ErrorKind, GagaraError, QueryError
from .models import ColumnSize, DatasetMeta, QueryResult, Row, SchemaColumn

__all__ = [
    "GagaraClient",
    "Dataset",
    "ClientConfig",
    # Convenience functions (default client)
    "upload",
    "upload_file",
    "from_token",
    "health",
    # Response types
    "QueryResult",
    "Row",
    "SchemaColumn",
    "ColumnSize",
    "DatasetMeta",
    # Errors
    "ErrorKind",
    "GagaraError",
    "DatasetNotFoundError",
    "QueryError",
]

__version__ = "0.1.0"
