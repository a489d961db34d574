"""
Database connection and pool management
"""

import asyncpg
import logging
from config.settings import DatabaseSettings

logger = logging.getLogger(__name__)

# Global database pool
db_pool = None

async def init_database(settings: DatabaseSettings):
    """Initialize database connection pool"""
    global db_pool
    db_pool = await asyncpg.create_pool(
        host=settings.host,
        port=settings.port,
        user=settings.user,
        password=settings.password,
        database=settings.database,
        min_size=settings.min_pool_size,
        max_size=settings.max_pool_size,
    )

    # Test connection
    async with db_pool.acquire() as conn:
        await conn.fetchval("SELECT 1")

    logger.info(f"Database initialized successfully: {settings!r}")


async def close_database():
    """Close database connection pool"""
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
    logger.info("Database connections closed")

def get_db_pool():
    """Get the database pool instance"""
    return db_pool
