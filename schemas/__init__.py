"""Request schemas used by the validation layer."""

from .product import ProductCreate, ProductUpdate
from .user import LoginRequest, RegisterRequest

__all__ = [
    "LoginRequest",
    "ProductCreate",
    "ProductUpdate",
    "RegisterRequest",
]
