import os
import aiosqlite
from contextlib import asynccontextmanager
from typing import Dict, Any, List, Optional
from config import settings
import logging

logger = logging.getLogger(__name__)


class Database:
    _db_path: str = settings.DATABASE_URL

    @classmethod
    async def initialize(cls):
        """Initialize database and create tables if they don't exist"""
        # Ensure directory exists for SQLite file
        db_dir = os.path.dirname(cls._db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        logger.info(f"Initializing database at: {cls._db_path}")

        async with cls.connection() as conn:
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute("PRAGMA busy_timeout=5000")
            await conn.execute("PRAGMA synchronous=NORMAL")
            await conn.commit()
            logger.info("SQLite WAL mode enabled")

        await cls._create_tables()

    @classmethod
    async def close(cls):
        """Close database connections - placeholder for cleanup if needed"""
        logger.info("Database cleanup completed")

    @classmethod
    @asynccontextmanager
    async def connection(cls):
        """Context manager for database connections"""
        async with aiosqlite.connect(cls._db_path) as conn:
            conn.row_factory = aiosqlite.Row  # Enable dict-like access
            # SQLite leaves FK enforcement off per connection
            await conn.execute("PRAGMA foreign_keys = ON")
            yield conn

    @classmethod
    async def execute(cls, query: str, params: tuple = None) -> int:
        """Execute a query without returning rows, return affected row count"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            await conn.commit()
            logger.debug(f"Executed: {query[:100]}...")
            return cursor.rowcount

    @classmethod
    async def insert(cls, query: str, params: tuple = None) -> int:
        """Execute an INSERT and return the new row id"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            await conn.commit()
            logger.debug(f"Inserted: {query[:100]}...")
            return cursor.lastrowid

    @classmethod
    async def fetch_one(cls, query: str, params: tuple = None) -> Optional[Dict[str, Any]]:
        """Fetch a single row"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            row = await cursor.fetchone()
            return dict(row) if row else None

    @classmethod
    async def fetch_all(cls, query: str, params: tuple = None) -> List[Dict[str, Any]]:
        """Fetch multiple rows"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            rows = await cursor.fetchall()
            return [dict(row) for row in rows]

    @classmethod
    async def health_check(cls) -> bool:
        """Check if database is accessible"""
        try:
            async with cls.connection() as conn:
                await conn.execute("SELECT 1")
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    @classmethod
    async def _create_tables(cls):
        """Create all database tables"""
        tables = [
            """
            CREATE TABLE IF NOT EXISTS categories (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                book_category TEXT NOT NULL
            );
            """,
            """
            CREATE TABLE IF NOT EXISTS books (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                book_name TEXT NOT NULL,
                book_author TEXT NOT NULL,
                category_id INTEGER NOT NULL,
                book_picture TEXT NOT NULL DEFAULT '',
                is_book_of_the_month INTEGER NOT NULL DEFAULT 0,
                FOREIGN KEY (category_id) REFERENCES categories(id) ON DELETE CASCADE
            );
            """,
            """
            CREATE TABLE IF NOT EXISTS reviewers (
                reviewers_id INTEGER PRIMARY KEY AUTOINCREMENT,
                reviewers_name TEXT NOT NULL,
                reviewers_email TEXT NOT NULL
            );
            """,
            """
            CREATE TABLE IF NOT EXISTS reviews (
                review_id INTEGER PRIMARY KEY AUTOINCREMENT,
                review_text TEXT NOT NULL,
                review_date TEXT NOT NULL,
                book_id INTEGER NOT NULL,
                reviewers_id INTEGER NOT NULL,
                FOREIGN KEY (book_id) REFERENCES books(id) ON DELETE CASCADE,
                FOREIGN KEY (reviewers_id) REFERENCES reviewers(reviewers_id) ON DELETE CASCADE
            );
            """,
            """
            CREATE TABLE IF NOT EXISTS reviewer_books (
                reviewer_id INTEGER NOT NULL,
                book_id INTEGER NOT NULL,
                PRIMARY KEY (reviewer_id, book_id),
                FOREIGN KEY (reviewer_id) REFERENCES reviewers(reviewers_id) ON DELETE CASCADE,
                FOREIGN KEY (book_id) REFERENCES books(id) ON DELETE CASCADE
            );
            """,
            "CREATE INDEX IF NOT EXISTS ix_reviewer_books_book_id ON reviewer_books(book_id);",
        ]

        async with cls.connection() as conn:
            for table_sql in tables:
                await conn.execute(table_sql)

            await conn.commit()
            logger.info("All database tables created successfully")
