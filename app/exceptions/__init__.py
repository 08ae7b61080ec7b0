"""Exceptions raised by the shop services and translated by the API layer."""


class ShopError(Exception):
    """Base exception for all client-caused errors."""
    status_code = 400
    default_code = "SHOP_ERROR"

    def __init__(self, message, code=None, status_code=None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message, "code": self.code}


class ValidationError(ShopError):
    """Bad input shape or value."""
    default_code = "VALIDATION_ERROR"


class NotFoundError(ShopError):
    """Unknown product, coupon or order reference."""
    status_code = 404
    default_code = "NOT_FOUND"


class ConflictError(ShopError):
    """Operation clashes with current coupon state."""
    status_code = 409
    default_code = "CONFLICT"


class PreconditionError(ShopError):
    """Store is not in a state that allows the operation."""
    default_code = "PRECONDITION_FAILED"


class ConfigError(Exception):
    """Invalid startup configuration."""
