from database import Database
from typing import List, Optional, Dict, Any
from schemas.responses import ReviewerResponse, ReviewerBookResponse
import logging

logger = logging.getLogger(__name__)

# reviewed_book_count is the number of reviews the reviewer has written
_SELECT_WITH_COUNT = """
    SELECT r.reviewers_id, r.reviewers_name, r.reviewers_email,
        COUNT(rv.review_id) AS reviewed_book_count
    FROM reviewers r
    LEFT JOIN reviews rv ON rv.reviewers_id = r.reviewers_id
"""


class ReviewerRepository:

    @staticmethod
    async def get_all() -> List[ReviewerResponse]:
        query = _SELECT_WITH_COUNT + " GROUP BY r.reviewers_id ORDER BY r.reviewers_id ASC"
        rows = await Database.fetch_all(query)
        return [ReviewerRepository._row_to_response(row) for row in rows]

    @staticmethod
    async def get_by_id(reviewer_id: int) -> Optional[ReviewerResponse]:
        query = _SELECT_WITH_COUNT + " WHERE r.reviewers_id = ? GROUP BY r.reviewers_id"
        row = await Database.fetch_one(query, (reviewer_id,))
        if not row:
            return None
        return ReviewerRepository._row_to_response(row)

    @staticmethod
    async def get_name(reviewer_id: int) -> Optional[str]:
        row = await Database.fetch_one(
            "SELECT reviewers_name FROM reviewers WHERE reviewers_id = ?", (reviewer_id,)
        )
        return row['reviewers_name'] if row else None

    @staticmethod
    async def exists(reviewer_id: int) -> bool:
        row = await Database.fetch_one("SELECT 1 FROM reviewers WHERE reviewers_id = ?", (reviewer_id,))
        return row is not None

    @staticmethod
    def _row_to_response(row: Dict[str, Any]) -> ReviewerResponse:
        return ReviewerResponse(
            reviewers_id=row['reviewers_id'],
            reviewers_name=row['reviewers_name'],
            reviewers_email=row['reviewers_email'],
            reviewed_book_count=row['reviewed_book_count'] or 0
        )

    @staticmethod
    async def create(reviewers_name: str, reviewers_email: str) -> int:
        reviewer_id = await Database.insert(
            "INSERT INTO reviewers (reviewers_name, reviewers_email) VALUES (?, ?)",
            (reviewers_name, reviewers_email)
        )
        logger.info(f"Reviewer created: {reviewers_name} (ID: {reviewer_id})")
        return reviewer_id

    @staticmethod
    async def update(reviewer_id: int, reviewers_name: str, reviewers_email: str) -> int:
        return await Database.execute(
            "UPDATE reviewers SET reviewers_name = ?, reviewers_email = ? WHERE reviewers_id = ?",
            (reviewers_name, reviewers_email, reviewer_id)
        )

    @staticmethod
    async def delete(reviewer_id: int) -> int:
        """Delete reviewer (cascades to reviews and reviewer links)"""
        deleted = await Database.execute("DELETE FROM reviewers WHERE reviewers_id = ?", (reviewer_id,))
        if deleted:
            logger.info(f"Reviewer {reviewer_id} deleted")
        return deleted

    @staticmethod
    async def get_books(reviewer_id: int) -> List[ReviewerBookResponse]:
        """Books linked to a reviewer through reviewer_books"""
        query = """
            SELECT rb.reviewer_id, r.reviewers_name, rb.book_id, b.book_name
            FROM reviewer_books rb
            JOIN reviewers r ON rb.reviewer_id = r.reviewers_id
            JOIN books b ON rb.book_id = b.id
            WHERE rb.reviewer_id = ?
            ORDER BY rb.book_id ASC
        """
        rows = await Database.fetch_all(query, (reviewer_id,))
        return [
            ReviewerBookResponse(
                reviewer_id=row['reviewer_id'],
                reviewer_name=row['reviewers_name'],
                book_id=row['book_id'],
                book_title=row['book_name']
            )
            for row in rows
        ]
