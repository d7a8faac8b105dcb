import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from functools import wraps

import asyncpg

logger = logging.getLogger(__name__)

# Connection bound to the running transaction (one per context)
_current_connection: ContextVar[asyncpg.Connection | None] = ContextVar(
    "current_connection", default=None
)
_db_pools: dict[str, asyncpg.Pool] = {}


class DatabaseManager:
    """Registry of named asyncpg pools and the transaction scope"""

    @classmethod
    async def create_pool(
        cls, dsn: str, name: str = "default", min_size: int = 1, max_size: int = 10
    ) -> asyncpg.Pool:
        """Open a pool for the given DSN and register it under `name`"""
        pool = await asyncpg.create_pool(dsn, min_size=min_size, max_size=max_size)
        await cls.add_pool(name, pool)
        logger.info("Database pool '%s' ready (min=%d, max=%d)", name, min_size, max_size)
        return pool

    @classmethod
    async def add_pool(cls, name: str, pool: asyncpg.Pool):
        """Add a database pool with a name"""
        _db_pools[name] = pool

    @classmethod
    async def get_pool(cls, name: str = "default") -> asyncpg.Pool:
        """Get a database pool by name"""
        if name not in _db_pools:
            raise ValueError(f"Database pool '{name}' not found")
        return _db_pools[name]

    @classmethod
    async def close_pool(cls, name: str = "default"):
        """Close and unregister a pool; unknown names are ignored"""
        pool = _db_pools.pop(name, None)
        if pool is not None:
            await pool.close()
            logger.info("Database pool '%s' closed", name)

    @classmethod
    def get_current_connection(cls) -> asyncpg.Connection | None:
        """Get the current active connection from context"""
        return _current_connection.get()

    @classmethod
    @asynccontextmanager
    async def transaction(cls, db_name: str = "default"):
        """Context manager for database transactions.

        Behavior:
        - Inside an existing transaction the same connection is reused and a
          nested transaction (savepoint) is opened on it.
        - Otherwise a connection is acquired from the named pool and a new
          transaction is started. The connection goes back to the pool when the
          context exits, normally or through an exception.

        Args:
            db_name: Name of the database pool to use
        """
        current_conn = _current_connection.get()

        if current_conn:
            async with current_conn.transaction():
                yield current_conn
        else:
            pool = await cls.get_pool(db_name)
            async with pool.acquire() as conn, conn.transaction():
                conn_token = _current_connection.set(conn)
                try:
                    yield conn
                finally:
                    _current_connection.reset(conn_token)


def transactional(db_name: str = "default"):
    """Decorator to run a coroutine within a database transaction.

    Args:
        db_name: Name of the database pool to use

    Example:
        @transactional()
        async def publish(postagem):
            return await postagem_repository.save(postagem)
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            async with DatabaseManager.transaction(db_name):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
