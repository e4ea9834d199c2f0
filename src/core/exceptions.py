from typing import List, Optional

from src.core.response.schemas import ErrorDetail


class AppException(Exception):
    """Base class for errors surfaced to the request layer."""

    status_code: int = 500
    error_code: str = "ERROR"

    def __init__(
        self,
        detail: str = "Unknown Error",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.error_details = error_details or []


class NotFoundException(AppException):
    status_code = 404
    error_code = "NOT_FOUND"


class ValidationException(AppException):
    status_code = 422
    error_code = "VALIDATION_ERROR"


class FileWriteException(AppException):
    status_code = 500
    error_code = "FILE_WRITE_ERROR"


class ServiceException(AppException):
    status_code = 500
    error_code = "SERVICE_ERROR"
