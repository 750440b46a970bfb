# backend/utils/errors.py
from typing import Optional


class AppError(Exception):
    """Base class for errors reported back to the API caller."""

    status_code = 400

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict:
        body = {"detail": self.message}
        body.update(self.context)
        return body


# Malformed or out-of-range input, raised before touching the store
class ValidationError(AppError):
    status_code = 422


class NotFoundError(AppError):
    status_code = 404


# A sale asks for more units than the product has
class InsufficientStock(AppError):
    status_code = 409

    def __init__(self, product_id: int, available: int, requested: int):
        super().__init__(
            f"Stock insuficiente. Disponible: {available}",
            product_id=product_id, available=available, requested=requested,
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested


class AuthorizationError(AppError):
    status_code = 403


class StoreError(AppError):
    """Failure of the record store.

    ``step`` names the stage of a multi-step operation that failed
    ("record", "stock_adjustment", "cost_update"), so the caller knows
    which part already went through.
    """

    status_code = 502

    def __init__(self, message: str, step: Optional[str] = None):
        if step:
            super().__init__(message, step=step)
        else:
            super().__init__(message)
        self.step = step
