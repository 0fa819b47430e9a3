"""
Error handling for Product Catalog Builder.

Provides specific exception types for the failure modes of a catalog build
and enough context for API responses and debugging.
"""

from typing import Dict, List, Any


class CatalogError(Exception):
    """Base exception for all catalog builder errors."""

    status_code = 500

    def __init__(self, message: str, details: Dict[str, Any] = None, suggestions: List[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'details': self.details,
            'suggestions': self.suggestions
        }


class ValidationError(CatalogError):
    """Raised when user input validation fails."""
    status_code = 400


class ProcessingError(CatalogError):
    """Raised when the build pipeline fails after validation."""
    pass


class ImageDecodeError(ProcessingError):
    """Raised when uploaded bytes cannot be decoded into an image."""
    status_code = 400


class RenderError(ProcessingError):
    """Raised when the document renderer fails."""
    pass


# Specific error classes for common failure modes

class MissingLogoError(ValidationError):
    """Raised when no company logo was supplied."""

    def __init__(self):
        super().__init__(
            "Company logo and name are required.",
            details={'missing': 'logo'},
            suggestions=[
                "Upload a logo image (PNG or JPEG)",
                "Check that the logo file is not empty"
            ]
        )


class MissingCompanyNameError(ValidationError):
    """Raised when the company name is missing or blank."""

    def __init__(self):
        super().__init__(
            "Company logo and name are required.",
            details={'missing': 'company_name'},
            suggestions=["Enter the company name shown on the cover page"]
        )


class EmptyCatalogError(ValidationError):
    """Raised when a catalog would contain no products."""

    def __init__(self):
        super().__init__(
            "Add some products first.",
            details={'product_count': 0},
            suggestions=["Add at least one product with a name, price and image"]
        )


class InvalidProductError(ValidationError):
    """Raised when a product entry is missing a name, price or image."""

    def __init__(self, index: int, missing_fields: List[str]):
        super().__init__(
            "Each product needs a name, price and at least one image.",
            details={
                'product_index': index,
                'missing_fields': missing_fields
            },
            suggestions=[
                f"Fill in {', '.join(missing_fields)} for product #{index + 1}"
            ]
        )


class InvalidImageFormatError(ValidationError):
    """Raised when an uploaded image has an unsupported format."""

    def __init__(self, filename: str, detected_type: str = None):
        super().__init__(
            f"Invalid image format: {filename}",
            details={
                'filename': filename,
                'detected_type': detected_type
            },
            suggestions=[
                "Use JPG or PNG format images",
                "Convert the file to a supported format",
                "Ensure the file is not corrupted"
            ]
        )


class FileTooLargeError(ValidationError):
    """Raised when an uploaded file exceeds the size limit."""

    def __init__(self, filename: str, size_mb: float, limit_mb: float):
        super().__init__(
            f"File too large: {filename} ({size_mb:.1f}MB exceeds {limit_mb:.1f}MB limit)",
            details={
                'filename': filename,
                'size_mb': size_mb,
                'limit_mb': limit_mb
            },
            suggestions=[
                f"Reduce file size to under {limit_mb:.1f}MB",
                "Compress the image using image editing software"
            ]
        )


class PageNotFoundError(CatalogError):
    """Raised when a preview is requested for a page the catalog does not have."""
    status_code = 404

    def __init__(self, page_index: int, page_count: int):
        super().__init__(
            f"Page {page_index} does not exist (catalog has {page_count} pages)",
            details={
                'page_index': page_index,
                'page_count': page_count
            },
            suggestions=[f"Request a page between 0 and {page_count - 1}"]
        )
