"""
Shared aiosqlite connection pool for the SQLite stores.

The bookkeeping database is one file; every store borrows connections
from a single module-level pool configured from storage settings.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from snackbooks.config import get_logger, get_settings
from snackbooks.core.exceptions import DatabaseError

logger = get_logger(__name__)

# Applied to every pooled connection, in order
CONNECTION_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA foreign_keys=ON",
)


class ConnectionPool:
    """
    Fixed number of aiosqlite connections handed out through a queue.

    Connections open on first use. A caller that cannot get one within
    the busy timeout gets a DatabaseError instead of waiting forever.
    """

    def __init__(self, db_path: Path, pool_size: int = 5, busy_timeout: int = 30000):
        self.db_path = Path(db_path)
        self.pool_size = max(pool_size, 1)
        self.busy_timeout = busy_timeout

        self._idle: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue()
        self._connections: list[aiosqlite.Connection] = []
        self._lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return bool(self._connections)

    @property
    def available(self) -> int:
        """Connections not currently borrowed."""
        return self._idle.qsize()

    async def initialize(self) -> None:
        """Open the pooled connections. Safe to call more than once."""
        async with self._lock:
            if self._connections:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            for _ in range(self.pool_size):
                conn = await aiosqlite.connect(self.db_path)
                for pragma in CONNECTION_PRAGMAS:
                    await conn.execute(pragma)
                await conn.execute(f"PRAGMA busy_timeout={int(self.busy_timeout)}")
                conn.row_factory = aiosqlite.Row

                self._connections.append(conn)
                self._idle.put_nowait(conn)

            logger.info(
                "connection_pool_initialized",
                db_path=str(self.db_path),
                pool_size=self.pool_size,
            )

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection for the duration of the block."""
        await self.initialize()

        try:
            conn = await asyncio.wait_for(self._idle.get(), timeout=self.busy_timeout / 1000)
        except TimeoutError:
            logger.error("connection_pool_exhausted", pool_size=self.pool_size)
            raise DatabaseError("acquire", "no free connection in the pool") from None

        try:
            yield conn
        finally:
            self._idle.put_nowait(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection; commit when the block succeeds, roll back if it raises."""
        async with self.acquire() as conn:
            try:
                yield conn
            except Exception as e:
                await conn.rollback()
                logger.warning("transaction_rolled_back", error_type=type(e).__name__)
                raise
            await conn.commit()

    async def ping(self) -> None:
        """Round-trip a trivial query; raises aiosqlite.Error when the file is unusable."""
        async with self.acquire() as conn:
            await conn.execute("SELECT 1")

    async def close(self) -> None:
        """Close every pooled connection."""
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()
            self._idle = asyncio.Queue()
            logger.info("connection_pool_closed", db_path=str(self.db_path))


_pool: ConnectionPool | None = None


async def get_pool() -> ConnectionPool:
    """The shared pool, built from storage settings on first call."""
    global _pool
    if _pool is None:
        storage = get_settings().storage
        _pool = ConnectionPool(
            db_path=storage.db_path,
            pool_size=storage.pool_size,
            busy_timeout=storage.busy_timeout,
        )
        await _pool.initialize()
    return _pool


async def close_pool() -> None:
    """Close and forget the shared pool."""
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    """Borrow a connection from the shared pool."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    """Borrow a connection from the shared pool inside a transaction."""
    pool = await get_pool()
    async with pool.transaction() as conn:
        yield conn
