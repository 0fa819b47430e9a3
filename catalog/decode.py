"""
Decoding of uploaded image bytes into Pillow images.
"""

import io
from pathlib import Path
from typing import Iterable, Optional
from PIL import Image, UnidentifiedImageError
from loguru import logger

from .errors import FileTooLargeError, ImageDecodeError, InvalidImageFormatError


def decode_image(data: bytes,
                 filename: str,
                 max_size: Optional[int] = None,
                 allowed_extensions: Optional[Iterable[str]] = None) -> Image.Image:
    """Validate and decode one uploaded image, returning a fully loaded image."""
    size = len(data)
    if max_size is not None and size > max_size:
        raise FileTooLargeError(
            filename=filename,
            size_mb=size / (1024 * 1024),
            limit_mb=max_size / (1024 * 1024)
        )

    if allowed_extensions is not None:
        file_ext = Path(filename or "").suffix.lower()
        if file_ext not in {ext.lower() for ext in allowed_extensions}:
            raise InvalidImageFormatError(filename, f"Extension: {file_ext or 'none'}")

    if not data:
        raise ImageDecodeError(
            f"Couldn't read image {filename}: file is empty",
            details={'filename': filename},
            suggestions=["Please try different files."]
        )

    try:
        # verify() leaves the image unusable, so open twice
        Image.open(io.BytesIO(data)).verify()
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageDecodeError(
            f"Couldn't read image {filename}: {e}",
            details={'filename': filename, 'size_bytes': size},
            suggestions=["Please try different files.", "Ensure the file is not corrupted"]
        ) from e

    logger.debug(f"Decoded image {filename}: {image.format} {image.size} {image.mode}")
    return image
