"""
SQL builders for table-scoped backend operations

Every builder returns a ``(query, params)`` tuple using asyncpg positional
placeholders ($1, $2, ...). Table and column names come from the service
layer, never from callers, and are checked against a plain identifier pattern.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Alias of the primary table inside every generated query
BASE_ALIAS = "t"


@dataclass(frozen=True)
class OrderBy:
    """Ordering spec for a single column"""
    column: str
    descending: bool = False


@dataclass(frozen=True)
class Embed:
    """
    Related rows embedded into each result row as a nested JSON value

    A many-to-one embed (``many=False``) joins ``table.foreign_column`` to the
    base row's ``local_column`` and yields one object or NULL. A one-to-many
    embed (``many=True``) joins ``table.foreign_column`` to the base row's
    ``local_column`` and yields a JSON array, ordered by ``order_by`` if given.
    """
    name: str
    table: str
    local_column: str
    foreign_column: str = "id"
    many: bool = False
    order_by: Optional[str] = None


def _check_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


def _embed_sql(embed: Embed) -> str:
    table = _check_identifier(embed.table)
    name = _check_identifier(embed.name)
    local = _check_identifier(embed.local_column)
    foreign = _check_identifier(embed.foreign_column)

    if embed.many:
        order = ""
        if embed.order_by:
            order = f" ORDER BY j.{_check_identifier(embed.order_by)}"
        return (
            f"(SELECT COALESCE(json_agg(j{order}), '[]'::json) FROM {table} j "
            f"WHERE j.{foreign} = {BASE_ALIAS}.{local}) AS {name}"
        )

    return (
        f"(SELECT row_to_json(j) FROM {table} j "
        f"WHERE j.{foreign} = {BASE_ALIAS}.{local} LIMIT 1) AS {name}"
    )


def _select_list(embeds: Sequence[Embed]) -> str:
    parts = [f"{BASE_ALIAS}.*"]
    parts.extend(_embed_sql(embed) for embed in embeds)
    return ", ".join(parts)


def _where_clause(
    filters: Optional[Dict[str, Any]],
    params: List[Any],
    alias: Optional[str] = None
) -> str:
    """Build an AND-ed equality WHERE clause, appending values to params"""
    if not filters:
        return ""

    prefix = f"{alias}." if alias else ""
    parts = []
    for column, value in filters.items():
        column = _check_identifier(column)
        if value is None:
            parts.append(f"{prefix}{column} IS NULL")
        else:
            params.append(value)
            parts.append(f"{prefix}{column} = ${len(params)}")

    return " WHERE " + " AND ".join(parts)


def build_select(
    table: str,
    filters: Optional[Dict[str, Any]] = None,
    order_by: Optional[Sequence[OrderBy]] = None,
    embeds: Sequence[Embed] = ()
) -> Tuple[str, List[Any]]:
    """Build SELECT query with optional filters, ordering and embeds"""
    table = _check_identifier(table)
    params: List[Any] = []

    query = f"SELECT {_select_list(embeds)} FROM {table} {BASE_ALIAS}"
    query += _where_clause(filters, params, BASE_ALIAS)

    if order_by:
        order_parts = []
        for order in order_by:
            direction = "DESC" if order.descending else "ASC"
            order_parts.append(f"{BASE_ALIAS}.{_check_identifier(order.column)} {direction}")
        query += f" ORDER BY {', '.join(order_parts)}"

    return query, params


def build_insert(
    table: str,
    rows: Sequence[Dict[str, Any]],
    embeds: Sequence[Embed] = ()
) -> Tuple[str, List[Any]]:
    """Build multi-row INSERT ... RETURNING query, embedding related rows"""
    if not rows:
        raise ValueError("Insert requires at least one row")

    table = _check_identifier(table)

    # Union of keys in first-seen order; rows missing a key insert DEFAULT
    columns: List[str] = []
    for row in rows:
        for column in row:
            if column not in columns:
                columns.append(_check_identifier(column))

    params: List[Any] = []
    value_groups = []
    for row in rows:
        placeholders = []
        for column in columns:
            if column in row:
                params.append(row[column])
                placeholders.append(f"${len(params)}")
            else:
                placeholders.append("DEFAULT")
        value_groups.append(f"({', '.join(placeholders)})")

    insert_sql = (
        f"INSERT INTO {table} ({', '.join(columns)}) "
        f"VALUES {', '.join(value_groups)} RETURNING *"
    )

    if not embeds:
        return insert_sql, params

    query = (
        f"WITH inserted AS ({insert_sql}) "
        f"SELECT {_select_list(embeds)} FROM inserted {BASE_ALIAS}"
    )
    return query, params


def build_update(
    table: str,
    values: Dict[str, Any],
    filters: Dict[str, Any],
    embeds: Sequence[Embed] = ()
) -> Tuple[str, List[Any]]:
    """Build UPDATE ... RETURNING query, embedding related rows"""
    if not values:
        raise ValueError("Update requires at least one value")
    if not filters:
        raise ValueError("Update requires at least one filter")

    table = _check_identifier(table)
    params: List[Any] = []

    set_parts = []
    for column, value in values.items():
        params.append(value)
        set_parts.append(f"{_check_identifier(column)} = ${len(params)}")

    update_sql = f"UPDATE {table} SET {', '.join(set_parts)}"
    update_sql += _where_clause(filters, params)
    update_sql += " RETURNING *"

    if not embeds:
        return update_sql, params

    query = (
        f"WITH updated AS ({update_sql}) "
        f"SELECT {_select_list(embeds)} FROM updated {BASE_ALIAS}"
    )
    return query, params


def build_delete(table: str, filters: Dict[str, Any]) -> Tuple[str, List[Any]]:
    """Build DELETE query; unfiltered deletes are refused"""
    if not filters:
        raise ValueError("Delete requires at least one filter")

    table = _check_identifier(table)
    params: List[Any] = []
    query = f"DELETE FROM {table}" + _where_clause(filters, params)
    return query, params


def build_count(
    table: str,
    filters: Optional[Dict[str, Any]] = None
) -> Tuple[str, List[Any]]:
    """Build exact COUNT(*) query"""
    table = _check_identifier(table)
    params: List[Any] = []
    query = f"SELECT COUNT(*) FROM {table}" + _where_clause(filters, params)
    return query, params
