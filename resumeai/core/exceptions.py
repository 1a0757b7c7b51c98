"""Custom exception classes"""

from typing import Any, Optional


class ResumeAIException(Exception):
    """Base exception for ResumeAI"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ResumeAIException):
    """Exception for validation errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundException(ResumeAIException):
    """Exception for resource not found errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=404, details=details)


class ConflictException(ResumeAIException):
    """Exception for resource conflict errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=409, details=details)


class AnalysisInProgressException(ConflictException):
    """Raised when an analysis is requested while another one is still running"""

    def __init__(self, state: str):
        super().__init__(
            "An analysis is already in progress",
            details={"state": state}
        )


class AnalysisFailedException(ResumeAIException):
    """Exception for failures inside the analysis provider"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)
