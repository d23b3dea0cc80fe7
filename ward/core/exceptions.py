"""
Error hierarchy for the Ward Trucking client.

Every failure is tagged with the stage of the exchange where it happened
(serialization, transport, deserialization, empty result).
"""
from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(Enum):
    """Standardized error codes"""
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"
    EMPTY_RESULT = "EMPTY_RESULT"


class WardError(Exception):
    """Base exception for Ward API failures"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.TRANSPORT_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dict, e.g. for an API response"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class SerializationError(WardError):
    """The request could not be converted to XML"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.SERIALIZATION_ERROR, details)


class TransportError(WardError):
    """The POST to Ward failed (network error or timeout)"""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timed_out: bool = False,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if url:
            error_details["url"] = url
        error_details["timed_out"] = timed_out

        self.url = url
        self.timed_out = timed_out
        super().__init__(message, ErrorCode.TRANSPORT_ERROR, error_details)


class DeserializationError(WardError):
    """The response body could not be read into a response model"""

    def __init__(
        self,
        message: str,
        raw_body: str = "",
        details: Optional[Dict[str, Any]] = None
    ):
        self.raw_body = raw_body
        super().__init__(message, ErrorCode.DESERIALIZATION_ERROR, details)


class EmptyResultError(WardError):
    """
    Ward answered with a well-formed envelope but no usable result
    (e.g. no pickup confirmation number).

    raw_body holds the response text; diagnostics holds a loose dict
    re-parse of it, empty if the body was not XML.
    """

    def __init__(
        self,
        message: str,
        raw_body: str = "",
        diagnostics: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.raw_body = raw_body
        self.diagnostics = diagnostics or {}
        super().__init__(message, ErrorCode.EMPTY_RESULT, details)
