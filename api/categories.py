from fastapi import APIRouter, HTTPException, Response
from typing import List
from schemas.requests import CategoryRequest
from schemas.responses import CategoryResponse
from repositories.category_repo import CategoryRepository
from api.errors import field_error, not_found
from utils.file_utils import remove_book_pictures
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/Categories", response_model=List[CategoryResponse])
async def list_categories():
    try:
        return await CategoryRepository.get_all()
    except Exception as e:
        logger.error(f"Error fetching categories: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get("/Categories/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int):
    try:
        category = await CategoryRepository.get_by_id(category_id)
        if not category:
            raise not_found("Category")
        return category
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching category {category_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch category")


@router.post("/Categories", response_model=CategoryResponse, status_code=201)
async def create_category(request: CategoryRequest, response: Response):
    """
    Create a category. An id of 0 lets the database assign one;
    any other id must not be taken yet.
    """
    try:
        if request.id and await CategoryRepository.exists(request.id):
            raise field_error("id", "The ID is already taken. Please choose another ID.")

        category_id = await CategoryRepository.create(request.book_category, request.id)

        response.headers["Location"] = f"/api/Categories/{category_id}"
        return CategoryResponse(id=category_id, book_category=request.book_category)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating category: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create category")


@router.put("/Categories/{category_id}", status_code=204)
async def update_category(category_id: int, request: CategoryRequest):
    if request.id != category_id:
        raise field_error("id", "The ID in the URL does not match the ID in the body.")

    try:
        if not await CategoryRepository.exists(category_id):
            raise not_found("Category")

        updated = await CategoryRepository.update(category_id, request.book_category)
        if not updated and not await CategoryRepository.exists(category_id):
            raise not_found("Category")

        logger.info(f"Category {category_id} updated")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating category {category_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update category")


@router.delete("/Categories/{category_id}", status_code=204)
async def delete_category(category_id: int):
    """Delete a category together with its books"""
    try:
        book_ids = await CategoryRepository.get_book_ids(category_id)
        deleted = await CategoryRepository.delete(category_id)
        if not deleted:
            raise not_found("Category")

        for book_id in book_ids:
            await remove_book_pictures(book_id)
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting category {category_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete category")
