from fastapi import APIRouter, HTTPException, Form, File, UploadFile, Response
from typing import List, Optional
from schemas.requests import UpdateBookRequest
from schemas.responses import BookResponse, BookDetailResponse, ReviewerBookResponse
from repositories.book_repo import BookRepository
from repositories.category_repo import CategoryRepository
from utils.file_utils import save_book_picture, remove_book_pictures, InvalidPictureError
from api.errors import field_error, not_found
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/Books/List", response_model=List[BookResponse])
async def list_books():
    """List all books"""
    try:
        return await BookRepository.get_all()
    except Exception as e:
        logger.error(f"Error fetching books: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch books")


@router.get("/Books/Find/{book_id}", response_model=BookDetailResponse)
async def find_book(book_id: int):
    """
    Get a book with its picture and category
    """
    try:
        book = await BookRepository.get_by_id(book_id)

        if not book:
            raise not_found("Book")

        return book
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching book {book_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch book details")


@router.post("/Books/Add", response_model=BookResponse, status_code=201)
async def add_book(
    response: Response,
    book_name: str = Form(..., alias="bookName", max_length=50),
    book_author: str = Form(..., alias="bookAuthor", max_length=50),
    category_id: int = Form(..., alias="categoryId"),
    is_book_of_the_month: bool = Form(..., alias="isBookOfTheMonth"),
    book_id: Optional[int] = Form(None, alias="id"),
    book_picture: Optional[UploadFile] = File(None, alias="bookPicture"),
):
    """
    Create a book from multipart form data.
    The optional bookPicture is compressed and stored as the book cover.
    """
    try:
        if not await CategoryRepository.exists(category_id):
            raise field_error("categoryId", "Choose a category")

        if book_id and await BookRepository.exists(book_id):
            raise field_error("id", "The ID is already taken. Please choose another ID.")

        new_id = await BookRepository.create({
            'id': book_id,
            'book_name': book_name,
            'book_author': book_author,
            'category_id': category_id,
            'is_book_of_the_month': is_book_of_the_month,
        })

        if book_picture is not None and book_picture.filename:
            # A failed cover upload must not leave the book behind
            try:
                picture_path = await save_book_picture(book_picture, new_id)
                await BookRepository.update_picture(new_id, picture_path)
            except InvalidPictureError as e:
                await BookRepository.delete(new_id)
                raise field_error("bookPicture", str(e))
            except Exception:
                await BookRepository.delete(new_id)
                await remove_book_pictures(new_id)
                raise

        response.headers["Location"] = f"/api/Books/Find/{new_id}"
        return BookResponse(
            id=new_id,
            book_name=book_name,
            book_author=book_author,
            category_id=category_id,
            is_book_of_the_month=is_book_of_the_month
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating book: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create book")


@router.put("/Books/Update/{book_id}", status_code=204)
async def update_book(book_id: int, book: UpdateBookRequest):
    """Replace a book's fields. The picture is left untouched."""
    if book.id != book_id:
        raise field_error("id", "The ID in the URL does not match the ID in the body.")

    try:
        if not await BookRepository.exists(book_id):
            raise not_found("Book")

        if not await CategoryRepository.exists(book.category_id):
            raise field_error("categoryId", "Choose a category")

        updated = await BookRepository.update(book_id, book.model_dump(exclude={'id'}))
        if not updated and not await BookRepository.exists(book_id):
            raise not_found("Book")

        logger.info(f"Book {book_id} updated")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating book {book_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update book")


@router.delete("/Books/Delete/{book_id}", status_code=204)
async def delete_book(book_id: int):
    try:
        deleted = await BookRepository.delete(book_id)
        if not deleted:
            raise not_found("Book")

        await remove_book_pictures(book_id)
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting book {book_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete book")


@router.get("/Books/{book_id}/Reviewers", response_model=List[ReviewerBookResponse])
async def list_book_reviewers(book_id: int):
    """Reviewers who have reviewed this book"""
    try:
        if not await BookRepository.exists(book_id):
            raise not_found("Book")

        return await BookRepository.get_reviewers(book_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching reviewers for book {book_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch book reviewers")
