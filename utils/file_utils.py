# File utilities
import aiofiles
import asyncio
import shutil
from pathlib import Path
from fastapi import UploadFile
import logging
from config import settings
from PIL import Image, UnidentifiedImageError
import io

logger = logging.getLogger(__name__)

BOOKS_SUBDIR = "books"


class InvalidPictureError(ValueError):
    """Uploaded picture is too large or not a readable image"""


def compress_image(image_data: bytes, max_width: int = 1000, quality: int = 90) -> bytes:
    """
    Compress image to max_width with quality setting.
    Quality 90: Near-perfect visual quality, ~200-250KB for book covers
    """
    try:
        img = Image.open(io.BytesIO(image_data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidPictureError("The uploaded file is not a valid image.") from e

    buffer = io.BytesIO()
    try:
        # JPEG only holds 8-bit RGB, grayscale or CMYK
        if img.mode.startswith(('I', 'F')):
            img = img.convert('L')
        elif img.mode not in ('RGB', 'L', 'CMYK'):
            img = img.convert('RGB')

        if img.width > max_width:
            ratio = max_width / img.width
            new_height = int(img.height * ratio)
            img = img.resize((max_width, new_height), Image.Resampling.LANCZOS)

        img.save(buffer, format='JPEG', quality=quality, optimize=True)
    except (OSError, ValueError) as e:
        raise InvalidPictureError("The uploaded image could not be converted to JPEG.") from e
    return buffer.getvalue()


def book_pictures_dir(book_id: int) -> Path:
    return Path(settings.UPLOADS_DIR) / BOOKS_SUBDIR / str(book_id)


async def save_book_picture(upload_file: UploadFile, book_id: int) -> str:
    """
    Compress and save a book cover
    Returns: path relative to UPLOADS_DIR (stored in books.book_picture)
    """
    content = await upload_file.read()
    max_bytes = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
    if len(content) > max_bytes:
        raise InvalidPictureError(f"The picture exceeds {settings.MAX_UPLOAD_SIZE_MB} MB.")

    compressed = compress_image(content, max_width=settings.PICTURE_MAX_WIDTH)

    picture_dir = book_pictures_dir(book_id)
    picture_dir.mkdir(parents=True, exist_ok=True)
    filepath = picture_dir / "cover.jpg"

    async with aiofiles.open(filepath, 'wb') as f:
        await f.write(compressed)

    logger.info(f"Book picture saved: {filepath}")

    return f"{BOOKS_SUBDIR}/{book_id}/cover.jpg"


async def remove_book_pictures(book_id: int) -> None:
    """Delete a book's picture folder off the event loop"""
    picture_dir = book_pictures_dir(book_id)
    if picture_dir.exists():
        await asyncio.get_running_loop().run_in_executor(
            None,
            lambda: shutil.rmtree(picture_dir, ignore_errors=True)
        )
        logger.info(f"Removed pictures for book {book_id}")
