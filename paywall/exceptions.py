"""Application exception hierarchy.

Pricing and placeholder operations never raise: missing data degrades to an
absent value. These errors belong to the inbound boundaries only (catalog
payloads and layout configuration).
"""

_DEFAULT_USER_MSG = "Something went wrong"
_OFFER_PAYLOAD_MSG = "Product is temporarily unavailable"
_LAYOUT_MSG = "Paywall layout is not supported"


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "Internal error",
        user_message: str = _DEFAULT_USER_MSG,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message


class OfferPayloadError(AppError):
    """Raised when a catalog payload cannot be turned into a ProductOffer."""

    def __init__(
        self,
        message: str = "Invalid product offer payload",
        user_message: str = _OFFER_PAYLOAD_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class UnsupportedBlockTypeError(AppError):
    """Raised when the layout names a products block type we cannot render."""

    def __init__(
        self,
        message: str = "Unsupported products block type",
        user_message: str = _LAYOUT_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)
