from database import Database
from typing import List, Optional, Dict, Any
from schemas.responses import CategoryResponse
import logging

logger = logging.getLogger(__name__)


class CategoryRepository:

    @staticmethod
    async def get_all() -> List[CategoryResponse]:
        """Get all categories ordered by id"""
        rows = await Database.fetch_all("SELECT * FROM categories ORDER BY id ASC")
        return [CategoryRepository._row_to_response(row) for row in rows]

    @staticmethod
    async def get_by_id(category_id: int) -> Optional[CategoryResponse]:
        row = await Database.fetch_one("SELECT * FROM categories WHERE id = ?", (category_id,))
        if not row:
            return None
        return CategoryRepository._row_to_response(row)

    @staticmethod
    async def exists(category_id: int) -> bool:
        row = await Database.fetch_one("SELECT 1 FROM categories WHERE id = ?", (category_id,))
        return row is not None

    @staticmethod
    def _row_to_response(row: Dict[str, Any]) -> CategoryResponse:
        return CategoryResponse(id=row['id'], book_category=row['book_category'])

    @staticmethod
    async def create(book_category: str, category_id: Optional[int] = None) -> int:
        """Create new category, return category_id. A falsy id lets SQLite assign one."""
        if category_id:
            new_id = await Database.insert(
                "INSERT INTO categories (id, book_category) VALUES (?, ?)",
                (category_id, book_category)
            )
        else:
            new_id = await Database.insert(
                "INSERT INTO categories (book_category) VALUES (?)",
                (book_category,)
            )
        logger.info(f"Category created: {book_category} (ID: {new_id})")
        return new_id

    @staticmethod
    async def update(category_id: int, book_category: str) -> int:
        """Rename category, return affected row count"""
        return await Database.execute(
            "UPDATE categories SET book_category = ? WHERE id = ?",
            (book_category, category_id)
        )

    @staticmethod
    async def get_book_ids(category_id: int) -> List[int]:
        """Ids of the books filed under a category"""
        rows = await Database.fetch_all("SELECT id FROM books WHERE category_id = ?", (category_id,))
        return [row['id'] for row in rows]

    @staticmethod
    async def delete(category_id: int) -> int:
        """Delete category (cascades to its books), return affected row count"""
        deleted = await Database.execute("DELETE FROM categories WHERE id = ?", (category_id,))
        if deleted:
            logger.info(f"Category {category_id} deleted")
        return deleted
