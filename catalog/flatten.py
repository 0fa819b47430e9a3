"""
Product validation and flattening.

A product with several images becomes one row per image so the grid can treat
every cell the same way.
"""

from typing import List, Sequence
from loguru import logger

from .errors import EmptyCatalogError, InvalidProductError
from .models import ProductInput, ProductRow


def missing_fields(product: ProductInput) -> List[str]:
    """Names of the required fields a product is missing"""
    missing = []
    if not (product.name or "").strip():
        missing.append("name")
    if not (product.price or "").strip():
        missing.append("price")
    if not product.images:
        missing.append("image")
    return missing


def validate_products(inputs: Sequence[ProductInput]) -> None:
    """Raise on the first incomplete product, or when there are none at all."""
    if not inputs:
        raise EmptyCatalogError()

    for idx, product in enumerate(inputs):
        missing = missing_fields(product)
        if missing:
            raise InvalidProductError(idx, missing)


def flatten(inputs: Sequence[ProductInput]) -> List[ProductRow]:
    """Expand each product into one row per image, keeping input and image order."""
    rows = [
        ProductRow(
            name=product.name,
            price=product.price,
            description=product.description,
            image=image,
        )
        for product in inputs
        for image in product.images
    ]
    logger.debug(f"Flattened {len(inputs)} products into {len(rows)} rows")
    return rows
