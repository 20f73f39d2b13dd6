"""Core module exports: password hashing, JWT helpers and HTTP exceptions."""

from .exceptions import (
    ResourceNotFoundException,
    UnauthorizedAccessException,
)
from .security import (
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)

__all__ = [
    "create_access_token",
    "decode_token",
    "get_password_hash",
    "verify_password",
    "ResourceNotFoundException",
    "UnauthorizedAccessException",
]
