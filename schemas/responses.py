from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from schemas.base import CamelModel


class HealthResponse(BaseModel):
    status: str
    database: str


class CategoryResponse(CamelModel):
    id: int
    book_category: str


class BookResponse(CamelModel):
    id: Optional[int] = None
    book_name: str
    book_author: str
    category_id: int
    is_book_of_the_month: bool


class BookDetailResponse(CamelModel):
    id: int
    book_name: str
    book_author: str
    book_picture: str = ""
    is_book_of_the_month: bool
    category: CategoryResponse


class ReviewerResponse(CamelModel):
    reviewers_id: int
    reviewers_name: str
    reviewers_email: str
    reviewed_book_count: int = 0


class ReviewerBookResponse(CamelModel):
    reviewer_id: int
    reviewer_name: str
    book_id: int
    book_title: str


class ReviewResponse(CamelModel):
    review_id: int
    review_text: str
    review_date: datetime
    book_name: Optional[str] = None
    reviewers_name: Optional[str] = None
