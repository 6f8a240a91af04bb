"""
Shared error handling for the eTIMS integration layer.

Every failure surfaced to a caller is one of the classes below (or an
unclassified exception such as a transport error). ``format_error`` renders
any of them into the response envelope used by the HTTP front-end.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single failed field check."""

    field: str
    message: str


class ErrorBody(BaseModel):
    """The ``error`` member of a failure envelope."""

    message: str
    code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    validation_errors: Optional[List[FieldError]] = Field(default=None, alias="validationErrors")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Standard failure envelope."""

    success: bool = False
    error: ErrorBody
    status_code: int = Field(alias="statusCode")

    model_config = {"populate_by_name": True}

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class EtimsError(Exception):
    """Base exception for the integration layer."""

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.code = code
        self.details = details
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            error=ErrorBody(message=self.message, code=self.code, details=self.details),
            status_code=self.status_code,
        )


class ValidationError(EtimsError):
    """Request payload failed local schema checks; nothing was sent."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", errors: Optional[List[Dict[str, str]]] = None):
        self.errors = errors or []
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorBody(
                message=self.message,
                validation_errors=[FieldError(**item) for item in self.errors],
            ),
            status_code=self.status_code,
        )


class AuthenticationError(EtimsError):
    """Token issuance failed or the caller presented no usable bearer token."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=ErrorBody(message=self.message), status_code=self.status_code)


class ApiError(EtimsError):
    """The remote service reported a failure or returned an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, code=error_code, details=details)

    @property
    def error_code(self) -> Optional[str]:
        return self.code


def format_error(exc: BaseException) -> Dict[str, Any]:
    """Render any exception as a failure envelope."""
    if isinstance(exc, EtimsError):
        return exc.to_response().to_dict()

    return ErrorResponse(
        error=ErrorBody(message=str(exc) or "Internal Server Error"),
        status_code=500,
    ).to_dict()
