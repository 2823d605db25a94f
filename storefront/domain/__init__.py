"""Domain layer - storefront errors.

Example usage:
    from storefront.domain import DataAccessError

    try:
        rows = await repository.list_brands()
    except DataAccessError as e:
        logger.warning("Catalog unavailable", operation=e.operation)
"""

from storefront.domain.exceptions import DataAccessError, StorefrontError

__all__ = [
    "DataAccessError",
    "StorefrontError",
]
