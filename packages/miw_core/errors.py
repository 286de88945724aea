from typing import Optional, Dict, Any


class MIWBaseError(Exception):
    """
    Top-level exception for the MIW project.
    Every domain error raised inside a request handler derives from this class
    and carries the HTTP status the API layer answers with.

    Attributes:
        code (str): machine readable error code (e.g. 'BAD_INPUT')
        message (str): user-facing message, returned verbatim as {"error": message}
        status_code (int): HTTP status for the API response
        details (Optional[Dict[str, Any]]): extra debugging information (never returned)
    """
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(f"[{code}] {message}")


class ConfigurationError(MIWBaseError):
    """Raised when settings cannot be loaded or validated."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONF_ERROR", message=message, status_code=500, details=details)


class BadInputError(MIWBaseError):
    """Malformed or missing upload, invalid PDF."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="BAD_INPUT", message=message, status_code=400, details=details)


class InvalidReferenceError(MIWBaseError):
    """Unknown session id or role key."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_REFERENCE", message=message, status_code=400, details=details)


class PreconditionFailedError(MIWBaseError):
    """Operation requires a state the session has not reached yet (e.g. no role selected)."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="PRECONDITION_FAILED", message=message, status_code=400, details=details)


class InternalServiceError(MIWBaseError):
    """Unexpected failure, including extraction failures of unclassified shape."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INTERNAL_ERROR", message=message, status_code=500, details=details)
