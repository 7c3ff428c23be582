"""
Database connection and pool management
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import asyncpg

from esigma.database.query import (
    Embed,
    OrderBy,
    build_count,
    build_delete,
    build_insert,
    build_select,
    build_update,
)

logger = logging.getLogger(__name__)


class DatabaseError(RuntimeError):
    """Backend query or constraint failure"""


class RecordNotFoundError(DatabaseError):
    """A single-row operation matched no rows"""


async def _init_connection(conn: asyncpg.Connection) -> None:
    """Decode json/jsonb columns (including embedded rows) into Python objects"""
    for type_name in ("json", "jsonb"):
        await conn.set_type_codec(
            type_name,
            encoder=json.dumps,
            decoder=json.loads,
            schema="pg_catalog"
        )


class Database:
    """Table-scoped access to the relational backend over an asyncpg pool"""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    @classmethod
    async def connect(
        cls,
        dsn: str,
        min_size: int = 2,
        max_size: int = 10,
        command_timeout: float = 60
    ) -> "Database":
        """Create the connection pool and verify connectivity"""
        pool = await asyncpg.create_pool(
            dsn,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
            statement_cache_size=0,  # pgbouncer compatibility
            init=_init_connection
        )

        async with pool.acquire() as conn:
            await conn.fetchval("SELECT 1")

        logger.info("Database initialized successfully")
        return cls(pool)

    async def close(self) -> None:
        """Close database connection pool"""
        await self.pool.close()
        logger.info("Database connections closed")

    async def _fetch(self, query: str, params: List[Any]) -> List[Dict[str, Any]]:
        logger.debug(f"Executing query: {query}")
        logger.debug(f"Parameters: {params}")

        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(query, *params)
        except asyncpg.PostgresError as e:
            logger.error(f"Database error: {e}")
            raise DatabaseError(f"Database query failed: {e}") from e

        return [dict(row) for row in rows]

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Sequence[OrderBy]] = None,
        embeds: Sequence[Embed] = ()
    ) -> List[Dict[str, Any]]:
        """
        Read rows from a table

        Args:
            table: Table name
            filters: Equality filters {column: value}
            order_by: Ordering specs
            embeds: Related rows to embed in each result row

        Returns:
            List of row dicts
        """
        query, params = build_select(table, filters, order_by, embeds)
        return await self._fetch(query, params)

    async def insert(
        self,
        table: str,
        values: Dict[str, Any],
        embeds: Sequence[Embed] = ()
    ) -> Dict[str, Any]:
        """Insert one row and return it as stored"""
        query, params = build_insert(table, [values], embeds)
        rows = await self._fetch(query, params)

        if not rows:
            raise DatabaseError(f"Insert into {table} failed - no data returned")

        return rows[0]

    async def insert_many(
        self,
        table: str,
        rows: Sequence[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """Insert several rows in one statement and return them as stored"""
        if not rows:
            return []

        query, params = build_insert(table, rows)
        return await self._fetch(query, params)

    async def update(
        self,
        table: str,
        values: Dict[str, Any],
        filters: Dict[str, Any],
        embeds: Sequence[Embed] = ()
    ) -> List[Dict[str, Any]]:
        """Update every matching row and return the updated rows"""
        query, params = build_update(table, values, filters, embeds)
        return await self._fetch(query, params)

    async def update_one(
        self,
        table: str,
        values: Dict[str, Any],
        filters: Dict[str, Any],
        embeds: Sequence[Embed] = ()
    ) -> Dict[str, Any]:
        """Update exactly one row; raises RecordNotFoundError if none matched"""
        rows = await self.update(table, values, filters, embeds)

        if not rows:
            raise RecordNotFoundError(f"No record found in {table} matching {filters}")

        return rows[0]

    async def delete(self, table: str, filters: Dict[str, Any]) -> int:
        """Delete matching rows and return how many were removed"""
        query, params = build_delete(table, filters)
        logger.debug(f"Executing DELETE: {query}")

        try:
            async with self.pool.acquire() as conn:
                result = await conn.execute(query, *params)
        except asyncpg.PostgresError as e:
            logger.error(f"Database error during DELETE: {e}")
            raise DatabaseError(f"Database DELETE failed: {e}") from e

        # asyncpg returns "DELETE N" where N is the number of rows
        return int(result.split()[-1]) if result else 0

    async def count(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """Exact number of rows in a table"""
        query, params = build_count(table, filters)

        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchval(query, *params)
        except asyncpg.PostgresError as e:
            logger.error(f"Database error during COUNT: {e}")
            raise DatabaseError(f"Database COUNT failed: {e}") from e
