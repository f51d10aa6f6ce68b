from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 5


class DatabaseConnection:
    """Pooled connection factory shared by the repositories.

    Built once in ``build_container`` and passed to every repository. The pool
    is created lazily on first use and released by ``close()``.
    """

    def __init__(self, config: DBConfig, *, pool_name: str = "gym_checkin"):
        self._config = config
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._closed = False

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._closed:
            raise StoreError("Database connection has been closed")
        if self._pool is None:
            try:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._pool_name,
                    pool_size=int(self._config.pool_size),
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                )
            except mysql.connector.Error as e:
                raise StoreError(f"Cannot connect to database: {e}") from e
            logger.info(
                "Connection pool ready: %s@%s:%s/%s (size=%s)",
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
                self._config.pool_size,
            )
        return self._pool

    def connect(self):
        pool = self._get_pool()
        try:
            return pool.get_connection()
        except mysql.connector.Error as e:
            raise StoreError(f"Cannot get database connection: {e}") from e

    def close(self) -> None:
        """Drop the pool; connections checked out later raise StoreError."""
        self._pool = None
        self._closed = True
