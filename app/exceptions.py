from typing import Any, Mapping, Optional


class BarBookError(Exception):
    """Base class for errors raised by the data-access layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, offending values)
        code: optional machine-readable error code
        http_status: suggested status code for callers that surface errors over HTTP
    """

    http_status = 500
    default_message = "Workbook error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(BarBookError):
    """Raised when data handed to a repository is missing a required field or
    carries a value outside the data model. http_status is 400.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(BarBookError):
    """Raised when a table is missing from the store, or when a mutation
    targets an id that no row carries. http_status is 404.
    """

    http_status = 404
    default_message = "Not found"
