from fastapi import APIRouter, HTTPException, Response
from typing import List
from schemas.requests import CreateReviewRequest, UpdateReviewRequest
from schemas.responses import ReviewResponse
from repositories.review_repo import ReviewRepository
from repositories.reviewer_repo import ReviewerRepository
from repositories.book_repo import BookRepository
from api.errors import field_error, not_found
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/Reviews/List", response_model=List[ReviewResponse])
async def list_reviews():
    try:
        return await ReviewRepository.get_all()
    except Exception as e:
        logger.error(f"Error fetching reviews: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.get("/Reviews/Find/{review_id}", response_model=ReviewResponse)
async def find_review(review_id: int):
    try:
        review = await ReviewRepository.get_by_id(review_id)
        if not review:
            raise not_found("Review")
        return review
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching review {review_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch review")


@router.post("/Reviews/Add", response_model=ReviewResponse, status_code=201)
async def add_review(request: CreateReviewRequest, response: Response):
    """
    Create a review dated now (UTC) and record that the reviewer
    has reviewed the book.
    """
    try:
        reviewer_name = await ReviewerRepository.get_name(request.reviewers_id)
        if reviewer_name is None:
            raise field_error("reviewersId", "Invalid reviewer ID")

        book = await BookRepository.get_by_id(request.book_id)
        if not book:
            raise field_error("bookId", "Invalid book ID")

        created = await ReviewRepository.create(
            review_text=request.review_text,
            reviewers_id=request.reviewers_id,
            book_id=request.book_id
        )

        response.headers["Location"] = f"/api/Reviews/Find/{created['review_id']}"
        return ReviewResponse(
            review_id=created['review_id'],
            review_text=request.review_text,
            review_date=created['review_date'],
            book_name=book.book_name,
            reviewers_name=reviewer_name
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating review: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create review")


@router.put("/Reviews/Update/{review_id}", status_code=204)
async def update_review(review_id: int, request: UpdateReviewRequest):
    """Only the review text can change"""
    if review_id <= 0:
        raise field_error("id", "The review ID must be positive.")

    try:
        if not await ReviewRepository.exists(review_id):
            raise not_found("Review")

        updated = await ReviewRepository.update_text(review_id, request.review_text)
        if not updated and not await ReviewRepository.exists(review_id):
            raise not_found("Review")

        logger.info(f"Review {review_id} updated")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating review {review_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update review")


@router.delete("/Reviews/Delete/{review_id}", status_code=204)
async def delete_review(review_id: int):
    try:
        deleted = await ReviewRepository.delete(review_id)
        if not deleted:
            raise not_found("Review")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting review {review_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete review")
