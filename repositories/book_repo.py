from typing import List, Optional, Dict, Any
from database import Database
from schemas.responses import BookResponse, BookDetailResponse, CategoryResponse, ReviewerBookResponse
import logging

logger = logging.getLogger(__name__)


class BookRepository:

    @staticmethod
    async def get_all() -> List[BookResponse]:
        """Get all books ordered by id"""
        rows = await Database.fetch_all("SELECT * FROM books ORDER BY id ASC")
        return [BookRepository._row_to_response(row) for row in rows]

    @staticmethod
    async def get_by_id(book_id: int) -> Optional[BookDetailResponse]:
        """Get book by ID with its category"""
        query = """
            SELECT b.*, c.book_category
            FROM books b
            JOIN categories c ON b.category_id = c.id
            WHERE b.id = ?
        """
        row = await Database.fetch_one(query, (book_id,))

        if not row:
            return None

        return BookRepository._row_to_detail_response(row)

    @staticmethod
    async def exists(book_id: int) -> bool:
        row = await Database.fetch_one("SELECT 1 FROM books WHERE id = ?", (book_id,))
        return row is not None

    @staticmethod
    def _row_to_response(row: Dict[str, Any]) -> BookResponse:
        """Convert DB row to BookResponse"""
        return BookResponse(
            id=row['id'],
            book_name=row['book_name'],
            book_author=row['book_author'],
            category_id=row['category_id'],
            is_book_of_the_month=bool(row['is_book_of_the_month'])
        )

    @staticmethod
    def _row_to_detail_response(row: Dict[str, Any]) -> BookDetailResponse:
        """Convert joined DB row to BookDetailResponse"""
        return BookDetailResponse(
            id=row['id'],
            book_name=row['book_name'],
            book_author=row['book_author'],
            book_picture=f"/uploads/{row['book_picture']}" if row['book_picture'] else "",
            is_book_of_the_month=bool(row['is_book_of_the_month']),
            category=CategoryResponse(id=row['category_id'], book_category=row['book_category'])
        )

    @staticmethod
    async def create(book_data: dict) -> int:
        """Create new book, return book_id"""
        columns = ['book_name', 'book_author', 'category_id', 'is_book_of_the_month']
        if book_data.get('id'):
            columns.insert(0, 'id')

        query = f"""
            INSERT INTO books ({", ".join(columns)})
            VALUES ({", ".join("?" for _ in columns)})
        """
        params = tuple(book_data[c] for c in columns)

        book_id = await Database.insert(query, params)
        logger.info(f"Book created: {book_data['book_name']} (ID: {book_id})")
        return book_id

    @staticmethod
    async def update_picture(book_id: int, book_picture: str) -> None:
        await Database.execute(
            "UPDATE books SET book_picture = ? WHERE id = ?",
            (book_picture, book_id)
        )

    @staticmethod
    async def update(book_id: int, updates: dict) -> int:
        """Update book fields dynamically, return affected row count"""
        if not updates:
            return 0

        # Build dynamic query
        fields = ", ".join([f"{key} = ?" for key in updates.keys()])
        query = f"UPDATE books SET {fields} WHERE id = ?"

        params = tuple(updates.values()) + (book_id,)
        return await Database.execute(query, params)

    @staticmethod
    async def delete(book_id: int) -> int:
        """Delete book (cascades to reviews and reviewer links)"""
        deleted = await Database.execute("DELETE FROM books WHERE id = ?", (book_id,))
        if deleted:
            logger.info(f"Book {book_id} deleted")
        return deleted

    @staticmethod
    async def get_reviewers(book_id: int) -> List[ReviewerBookResponse]:
        """Reviewers linked to a book through reviewer_books"""
        query = """
            SELECT rb.reviewer_id, r.reviewers_name, rb.book_id, b.book_name
            FROM reviewer_books rb
            JOIN reviewers r ON rb.reviewer_id = r.reviewers_id
            JOIN books b ON rb.book_id = b.id
            WHERE rb.book_id = ?
            ORDER BY rb.reviewer_id ASC
        """
        rows = await Database.fetch_all(query, (book_id,))
        return [
            ReviewerBookResponse(
                reviewer_id=row['reviewer_id'],
                reviewer_name=row['reviewers_name'],
                book_id=row['book_id'],
                book_title=row['book_name']
            )
            for row in rows
        ]
