from fastapi import APIRouter, HTTPException, Response
from typing import List
from schemas.requests import ReviewerRequest
from schemas.responses import ReviewerResponse, ReviewerBookResponse
from repositories.reviewer_repo import ReviewerRepository
from api.errors import field_error, not_found
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/Reviewers/List", response_model=List[ReviewerResponse])
async def list_reviewers():
    """List reviewers with the number of reviews each has written"""
    try:
        return await ReviewerRepository.get_all()
    except Exception as e:
        logger.error(f"Error fetching reviewers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch reviewers")


@router.get("/Reviewers/Find/{reviewer_id}", response_model=ReviewerResponse)
async def find_reviewer(reviewer_id: int):
    try:
        reviewer = await ReviewerRepository.get_by_id(reviewer_id)
        if not reviewer:
            raise not_found("Reviewer")
        return reviewer
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching reviewer {reviewer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch reviewer")


@router.post("/Reviewers/Add", response_model=ReviewerResponse, status_code=201)
async def add_reviewer(request: ReviewerRequest, response: Response):
    try:
        reviewer_id = await ReviewerRepository.create(
            reviewers_name=request.reviewers_name,
            reviewers_email=request.reviewers_email
        )

        response.headers["Location"] = f"/api/Reviewers/Find/{reviewer_id}"
        return ReviewerResponse(
            reviewers_id=reviewer_id,
            reviewers_name=request.reviewers_name,
            reviewers_email=request.reviewers_email,
            reviewed_book_count=0
        )
    except Exception as e:
        logger.error(f"Error creating reviewer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create reviewer")


@router.put("/Reviewers/Update/{reviewer_id}", status_code=204)
async def update_reviewer(reviewer_id: int, request: ReviewerRequest):
    if request.reviewers_id != reviewer_id:
        raise field_error("reviewersId", "The ID in the URL does not match the ID in the body.")

    try:
        if not await ReviewerRepository.exists(reviewer_id):
            raise not_found("Reviewer")

        updated = await ReviewerRepository.update(
            reviewer_id, request.reviewers_name, request.reviewers_email
        )
        if not updated and not await ReviewerRepository.exists(reviewer_id):
            raise not_found("Reviewer")

        logger.info(f"Reviewer {reviewer_id} updated")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating reviewer {reviewer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update reviewer")


@router.delete("/Reviewers/Delete/{reviewer_id}", status_code=204)
async def delete_reviewer(reviewer_id: int):
    """Delete a reviewer together with their reviews"""
    try:
        deleted = await ReviewerRepository.delete(reviewer_id)
        if not deleted:
            raise not_found("Reviewer")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting reviewer {reviewer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete reviewer")


@router.get("/Reviewers/{reviewer_id}/Books", response_model=List[ReviewerBookResponse])
async def list_reviewer_books(reviewer_id: int):
    """Books this reviewer has reviewed"""
    try:
        if not await ReviewerRepository.exists(reviewer_id):
            raise not_found("Reviewer")

        return await ReviewerRepository.get_books(reviewer_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching books for reviewer {reviewer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch reviewer books")
