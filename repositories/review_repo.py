# Database operations for reviews and the reviewer_books link table
from database import Database
from typing import List, Optional, Dict, Any
from datetime import datetime, timezone
from schemas.responses import ReviewResponse
import logging

logger = logging.getLogger(__name__)

UNKNOWN_BOOK = "Unknown"
UNKNOWN_REVIEWER = "Anonymous"

_SELECT_JOINED = """
    SELECT rv.review_id, rv.review_text, rv.review_date,
        b.book_name, r.reviewers_name
    FROM reviews rv
    LEFT JOIN books b ON rv.book_id = b.id
    LEFT JOIN reviewers r ON rv.reviewers_id = r.reviewers_id
"""


class ReviewRepository:

    @staticmethod
    async def get_all() -> List[ReviewResponse]:
        rows = await Database.fetch_all(_SELECT_JOINED + " ORDER BY rv.review_id ASC")
        return [ReviewRepository._row_to_response(row) for row in rows]

    @staticmethod
    async def get_by_id(review_id: int) -> Optional[ReviewResponse]:
        row = await Database.fetch_one(_SELECT_JOINED + " WHERE rv.review_id = ?", (review_id,))
        if not row:
            return None
        return ReviewRepository._row_to_response(row)

    @staticmethod
    async def exists(review_id: int) -> bool:
        row = await Database.fetch_one("SELECT 1 FROM reviews WHERE review_id = ?", (review_id,))
        return row is not None

    @staticmethod
    def _row_to_response(row: Dict[str, Any]) -> ReviewResponse:
        return ReviewResponse(
            review_id=row['review_id'],
            review_text=row['review_text'],
            review_date=row['review_date'],
            book_name=row['book_name'] if row['book_name'] is not None else UNKNOWN_BOOK,
            reviewers_name=row['reviewers_name'] if row['reviewers_name'] is not None else UNKNOWN_REVIEWER
        )

    @staticmethod
    async def create(review_text: str, reviewers_id: int, book_id: int) -> Dict[str, Any]:
        """
        Insert review and link reviewer to book in one transaction.
        Returns {'review_id', 'review_date'}.
        """
        review_date = datetime.now(timezone.utc)

        async with Database.connection() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO reviews (review_text, review_date, book_id, reviewers_id)
                VALUES (?, ?, ?, ?)
                """,
                (review_text, review_date.isoformat(), book_id, reviewers_id)
            )
            review_id = cursor.lastrowid
            await conn.execute(
                "INSERT OR IGNORE INTO reviewer_books (reviewer_id, book_id) VALUES (?, ?)",
                (reviewers_id, book_id)
            )
            await conn.commit()

        logger.info(f"Review created: {review_id} (reviewer {reviewers_id}, book {book_id})")
        return {'review_id': review_id, 'review_date': review_date}

    @staticmethod
    async def update_text(review_id: int, review_text: str) -> int:
        return await Database.execute(
            "UPDATE reviews SET review_text = ? WHERE review_id = ?",
            (review_text, review_id)
        )

    @staticmethod
    async def delete(review_id: int) -> int:
        """
        Delete review. Drops the reviewer_books link when no other review
        by the same reviewer for the same book remains.
        """
        async with Database.connection() as conn:
            cursor = await conn.execute(
                "SELECT reviewers_id, book_id FROM reviews WHERE review_id = ?",
                (review_id,)
            )
            row = await cursor.fetchone()
            if not row:
                return 0

            cursor = await conn.execute("DELETE FROM reviews WHERE review_id = ?", (review_id,))
            deleted = cursor.rowcount
            await conn.execute(
                """
                DELETE FROM reviewer_books
                WHERE reviewer_id = ? AND book_id = ?
                AND NOT EXISTS (
                    SELECT 1 FROM reviews WHERE reviewers_id = ? AND book_id = ?
                )
                """,
                (row['reviewers_id'], row['book_id'], row['reviewers_id'], row['book_id'])
            )
            await conn.commit()

        logger.info(f"Review {review_id} deleted")
        return deleted
