"""Custom exceptions for the CHMS application."""

from fastapi import HTTPException, status


class InvalidCredentialsException(HTTPException):
    """Raised when the email or password is wrong."""

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AccountInactiveException(HTTPException):
    """Raised when a deactivated account tries to authenticate."""

    def __init__(self, detail: str = "Account is inactive. Please contact an administrator."):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


class EmailAlreadyRegisteredException(HTTPException):
    def __init__(self, detail: str = "Email already registered"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class UnauthorizedAccessException(HTTPException):
    """
    Raised when the actor's role or ownership does not match the resource.

    Mothers only ever reach their own children and their own maternal records;
    every other combination ends here before any data is read.

    Status Code: 403 Forbidden
    """

    def __init__(self, detail: str = "Unauthorized access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


class ResourceNotFoundException(HTTPException):
    """Base class for 404 responses on a referenced id."""

    default_detail = "Resource not found"

    def __init__(self, detail: str = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail or self.default_detail,
        )


class ChildNotFoundException(ResourceNotFoundException):
    default_detail = "Child not found"


class MotherNotFoundException(ResourceNotFoundException):
    default_detail = "Mother not found"


class HealthRecordNotFoundException(ResourceNotFoundException):
    default_detail = "Health record not found"


class MotherHealthRecordNotFoundException(ResourceNotFoundException):
    default_detail = "Mother health record not found"


class ImmunizationNotFoundException(ResourceNotFoundException):
    default_detail = "Immunization record not found"


class AlertNotFoundException(ResourceNotFoundException):
    default_detail = "Alert not found"


__all__ = [
    "InvalidCredentialsException",
    "AccountInactiveException",
    "EmailAlreadyRegisteredException",
    "UnauthorizedAccessException",
    "ResourceNotFoundException",
    "ChildNotFoundException",
    "MotherNotFoundException",
    "HealthRecordNotFoundException",
    "MotherHealthRecordNotFoundException",
    "ImmunizationNotFoundException",
    "AlertNotFoundException",
]
