"""Storefront exceptions"""

from typing import Any, Optional


class StorefrontError(Exception):
    """Base exception for storefront errors"""
    pass


class StorefrontAPIError(StorefrontError):
    """The storefront API rejected a request or could not be reached"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.errors = errors or {}
        super().__init__(message)

    @property
    def is_validation_error(self) -> bool:
        return self.status_code == 422


class AuthenticationError(StorefrontAPIError):
    """Authentication-related errors"""
    pass


class CheckoutError(StorefrontError):
    """Order placement failed; the cart is left as it was"""

    def __init__(self, message: str, cause: Optional[StorefrontAPIError] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class EmptyCartError(CheckoutError):
    """Checkout attempted with nothing in the cart"""

    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message)
