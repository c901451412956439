"""
Outcomes other than success raised by DiffService.

The set is closed: every failure leaving the service is one of
InvalidPayload, NotFound or StoreFailure, and each carries a `kind` tag so
callers can branch on it directly.
"""


class DiffError(Exception):
    kind = "diff_error"


class InvalidPayload(DiffError):
    """Client-side problem with a side upload (bad identifier, bad base64)."""
    kind = "invalid_payload"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFound(DiffError):
    """No side has been uploaded for the identifier (or it is not a valid one)."""
    kind = "not_found"

    def __init__(self, identifier: str):
        super().__init__(f"diff not found for ID: {identifier}")
        self.identifier = identifier


class StoreFailure(DiffError):
    """Any error coming out of the side store; the original exception is kept."""
    kind = "store_failure"

    def __init__(self, message: str, cause: BaseException):
        super().__init__(f"{message}: {cause}")
        self.cause = cause
