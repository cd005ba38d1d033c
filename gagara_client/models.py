"""Response types returned by the gagara service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar("T")

# A query row: column name -> JSON scalar (None, bool, int, float or str)
Row = dict[str, Any]


@dataclass
class SchemaColumn:
    """A column as declared by the dataset's schema."""
    name: str
    data_type: str
    nullable: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchemaColumn:
        return cls(
            name=data["name"],
            data_type=data["data_type"],
            nullable=bool(data["nullable"]),
        )


@dataclass
class ColumnSize:
    """Storage footprint of a single column."""
    name: str
    size_bytes: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ColumnSize:
        return cls(name=data["name"], size_bytes=data["size_bytes"])


@dataclass
class DatasetMeta:
    """
    Dataset metadata: row count, file size and per-column sizes.

    Byte sizes are informational only.
    """
    row_count: int
    file_size_bytes: int
    columns: list[ColumnSize] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DatasetMeta:
        return cls(
            row_count=data["row_count"],
            file_size_bytes=data["file_size_bytes"],
            columns=[ColumnSize.from_dict(c) for c in data.get("columns", [])],
        )


@dataclass
class QueryResult:
    """Full query response: column names in server order plus the rows."""
    columns: list[str]
    rows: list[Any]

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        row_type: Callable[..., Any] | None = None,
    ) -> QueryResult:
        return cls(
            columns=list(data["columns"]),
            rows=project_rows(data["rows"], row_type),
        )


def project_rows(
    rows: list[Row],
    row_type: Callable[..., T] | None = None,
) -> list[Row] | list[T]:
    """
    Optionally convert raw rows into caller-supplied objects.

    Args:
        rows: Rows as returned by the server
        row_type: Callable accepting one keyword argument per column
                  (a dataclass, NamedTuple, pydantic model...). None keeps
                  the raw dicts.
    """
    if row_type is None:
        return rows
    return [row_type(**row) for row in rows]
