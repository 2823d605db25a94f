"""Domain exceptions.

The catalog only reads from an external store, so the taxonomy is small:
a common base class and a single data-access failure that collapses
connectivity, query and timeout errors into one signal.
"""

from typing import Any


class StorefrontError(Exception):
    """Base class for all storefront exceptions.

    All storefront errors should inherit from this class to allow
    catching them at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize storefront error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class DataAccessError(StorefrontError):
    """Raised when a catalog query against the store fails.

    The underlying cause (connection refused, bad query, timeout) is kept
    in ``details["reason"]`` and as ``__cause__`` but is not otherwise
    distinguished.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize data access error.

        Args:
            operation: Repository operation that failed (e.g. "list_brands").
            reason: Description of the underlying failure.
        """
        super().__init__(
            f"Catalog query '{operation}' failed: {reason}",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
