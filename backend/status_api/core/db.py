import asyncio
import logging
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from status_api.core.settings import DatabaseConfig

logger = logging.getLogger(__name__)

POOL_MAX_SIZE = 5
CONNECT_TIMEOUT_SECONDS = 2.0
IDLE_TIMEOUT_SECONDS = 10
QUERY_TIMEOUT_SECONDS = 1.5

FIRST_USER_QUERY = "SELECT * FROM users LIMIT 1"


class DatabaseUnavailable(Exception):
    """Raised when the database could not answer within the allotted time.

    Connection failures, query failures and timeouts all end up here; ``reason``
    is a short code meant for server-side logs only.
    """

    def __init__(self, reason: str, detail: Optional[str] = None) -> None:
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


def build_url(config: DatabaseConfig) -> URL:
    return URL.create(
        "postgresql+asyncpg",
        username=config.user,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.name,
    )


def create_engine_from_config(config: DatabaseConfig) -> AsyncEngine:
    """Build the bounded connection pool for the status queries.

    ``pool_timeout`` bounds the wait for a free pooled connection and the
    asyncpg ``timeout`` bounds opening a new one. Connections are recycled once
    they are older than the idle timeout.
    """
    logger.info("Connecting to database: %s", config.target)
    return create_async_engine(
        build_url(config),
        pool_size=POOL_MAX_SIZE,
        max_overflow=0,
        pool_timeout=CONNECT_TIMEOUT_SECONDS,
        pool_recycle=IDLE_TIMEOUT_SECONDS,
        connect_args={"timeout": CONNECT_TIMEOUT_SECONDS},
        echo=False,
    )


class UserGateway:
    def __init__(self, engine: AsyncEngine, timeout_seconds: float = QUERY_TIMEOUT_SECONDS) -> None:
        self.engine = engine
        self.timeout_seconds = timeout_seconds

    async def _query_first_user(self) -> Optional[dict[str, Any]]:
        async with self.engine.connect() as conn:
            result = await conn.execute(text(FIRST_USER_QUERY))
            row = result.mappings().first()
            return dict(row) if row is not None else None

    async def fetch_first_user(self) -> Optional[dict[str, Any]]:
        """Return the first ``users`` row, or None when the table is empty.

        Connection acquisition and the query share one deadline. When it
        expires the pending work is cancelled so the pooled connection is
        released instead of staying busy with an abandoned query.
        """
        try:
            return await asyncio.wait_for(self._query_first_user(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise DatabaseUnavailable("db_timeout") from exc
        except Exception as exc:
            raise DatabaseUnavailable("db_error", detail=str(exc)) from exc

    async def dispose(self) -> None:
        await self.engine.dispose()


__all__ = [
    "DatabaseUnavailable",
    "UserGateway",
    "create_engine_from_config",
    "build_url",
]
