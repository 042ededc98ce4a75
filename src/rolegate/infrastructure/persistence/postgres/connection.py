"""PostgreSQL async connection pool built from settings."""

from psycopg_pool import AsyncConnectionPool

from rolegate.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create an unopened pool; callers await pool.open() before the first unit of work."""
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
        open=False,
    )
