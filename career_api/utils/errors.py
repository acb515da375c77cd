"""
Error module

Exceptions raised by the service layer. Each carries the HTTP status it is
reported with; the application handlers in main.py render them as
{"error": message}.

@version 1.0.0
"""

from fastapi import status


class ApiError(Exception):
    """
    Base class for errors reported to the caller as {"error": message}
    """
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(ApiError):
    """
    A required input field is absent. Detected before any upstream call.
    """
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """
    A referenced parent resource does not exist
    """
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(ApiError):
    """
    The managed backend rejected a call or could not be reached.
    The message is the backend's own, forwarded verbatim.
    """
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int = None, code: str = None):
        super().__init__(message)
        self.upstream_status = status_code
        self.code = code
