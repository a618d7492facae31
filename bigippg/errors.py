"""Custom exceptions for the BIG-IP monitor client."""


class BigIpError(Exception):
    """Base exception for BIG-IP client errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class MappingError(BigIpError):
    """Base exception for configuration-to-record mapping failures."""


class MalformedIdentifier(MappingError):
    """Raised when a partitioned path has a leading separator but no name segment."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Malformed identifier '{path}'",
            details="expected '/<partition>/<name>' or '<name>'",
        )


class TypeMismatch(MappingError):
    """Raised when a value's runtime type does not match the expected type."""

    def __init__(self, key: str, expected: str, actual: str):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type mismatch for '{key}'",
            details=f"expected {expected}, got {actual}",
        )


class FieldNotFound(MappingError):
    """Raised when no record field matches a configuration key."""

    def __init__(self, key: str, record_type: str, candidates: tuple[str, ...] = ()):
        self.key = key
        self.record_type = record_type
        self.candidates = candidates
        details = None
        if candidates:
            details = "tried " + ", ".join(candidates)
        super().__init__(f"{record_type} has no field for '{key}'", details)


class ConfigurationError(BigIpError):
    """Exception raised for provider configuration errors."""

    def __init__(self, message: str = "Configuration error", details: str = None):
        super().__init__(message, details)


class APIError(BigIpError):
    """Exception raised for iControl REST API errors."""

    def __init__(
        self,
        message: str = "API request failed",
        status_code: int = None,
        response_body: str = None,
        details: str = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message, details)

    def __str__(self):
        parts = [self.message]
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        if self.details:
            parts.append(self.details)
        return " - ".join(parts)


class NotFoundError(APIError):
    """Exception raised when a device object is not found."""

    def __init__(self, resource_type: str = "Resource", resource_id: str = None):
        message = f"{resource_type} not found"
        if resource_id:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(message, status_code=404)


class ConnectionFailedError(APIError):
    """Exception raised when the management address cannot be reached."""

    def __init__(self, message: str = "Could not reach BIG-IP", details: str = None):
        super().__init__(message, details=details)
