from pydantic import EmailStr, Field, field_validator
from typing import Optional
from schemas.base import CamelModel


class CategoryRequest(CamelModel):
    id: int = 0
    book_category: str = Field(..., max_length=25)

    @field_validator("book_category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("BookCategory is required.")
        return v


class UpdateBookRequest(CamelModel):
    id: Optional[int] = None
    book_name: str = Field(..., max_length=50)
    book_author: str = Field(..., max_length=50)
    category_id: int
    is_book_of_the_month: bool


class ReviewerRequest(CamelModel):
    reviewers_id: int = 0
    reviewers_name: str
    reviewers_email: EmailStr
    # Accepted for symmetry with ReviewerResponse, never stored
    reviewed_book_count: int = 0

    @field_validator("reviewers_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v


class CreateReviewRequest(CamelModel):
    review_text: str = Field(..., max_length=1000)
    reviewers_id: int
    book_id: int


class UpdateReviewRequest(CamelModel):
    review_text: str = Field(..., max_length=1000)
