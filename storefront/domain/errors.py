# storefront/domain/errors.py
"""Domain exceptions raised by the stores and facades."""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    pass


class NotFoundError(StorefrontError):
    """Raised when a write path references an id that is not stored."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class PaymentError(StorefrontError):
    """Raised when the selected payment method did not approve the charge."""

    def __init__(self, message: str, method: str | None = None):
        self.method = method
        super().__init__(message)


class ValidationError(StorefrontError):
    """Raised when checkout input is incomplete or malformed."""

    pass
