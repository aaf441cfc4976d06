"""
Blog API Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions, one per error outcome of the API.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by services and repositories; caught by global handlers.

Exception Hierarchy:
    BlogError (base)
    ├── MissingFieldError          → 400 {"error": ...}
    ├── UniquenessError            → 400 {"error": ...}
    │   └── DuplicateEmailError
    ├── NotFoundError              → 404 {"error": ...}
    ├── StorageError               → 500 {"message": ...}
    │   ├── ValidationError
    │   └── InvalidIdError
    └── DatabaseConnectionError    → startup abort (never reaches a request)

    Anything outside this tree is an unknown error and becomes
    500 {"message": str(exc)}.
"""

from typing import Any, Dict, List, Optional


class BlogError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Text returned in the API response
        context:  Extra debug info (logged, not returned)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unknown error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class MissingFieldError(BlogError):
    """
    Raised when the request body omits a required field.

    What:    A presence check in a service failed before storage was touched.
    HTTP:    400 Bad Request

    Example response:
        {"error": "firstName, lastName, email, and password are required"}
    """

    status_code = 400

    def __init__(
        self,
        fields: List[str],
        missing: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["missing"] = missing or []
        super().__init__(message=f"{join_fields(fields)} are required", context=ctx)
        self.fields = fields
        self.missing = ctx["missing"]


class UniquenessError(BlogError):
    """
    Raised when an insert or update hits a unique constraint.

    What:    The database rejected the write atomically; nothing was stored.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Record already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateEmailError(UniquenessError):
    """A user with the same email already exists."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="User already exists", field="email", context=context)


class NotFoundError(BlogError):
    """
    Raised when a requested id does not resolve to a record.

    HTTP:    404 Not Found
    Message: "<Resource> not found", e.g. "Post not found"
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class StorageError(BlogError):
    """
    Raised when the storage layer rejects an operation.

    HTTP:    500 Internal Server Error, with the storage message in the body.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(StorageError):
    """
    Raised when a record breaks a schema constraint (required, trim, email
    pattern, minimum length, malformed reference).

    All failing fields are reported at once:
        "User validation failed: email: Email is not valid, password: ..."
    """

    def __init__(
        self,
        model: str,
        errors: Dict[str, str],
        context: Optional[Dict[str, Any]] = None,
    ):
        detail = ", ".join(f"{field}: {msg}" for field, msg in errors.items())
        ctx = context or {}
        ctx["errors"] = dict(errors)
        super().__init__(message=f"{model} validation failed: {detail}", context=ctx)
        self.model = model
        self.errors = dict(errors)


class InvalidIdError(StorageError):
    """
    Raised when an id is not a well-formed identifier.

    Distinct from NotFoundError: the id could never match any record.
    """

    def __init__(
        self,
        value: Any,
        model: str = "record",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["value"] = str(value)
        super().__init__(
            message=f'Cast to id failed for value "{value}" for model "{model}"',
            context=ctx,
        )
        self.value = value


class DatabaseConnectionError(BlogError):
    """
    Raised when the initial database connection fails.

    When:    During startup, before any request is served.
    Effect:  The lifespan handler lets it propagate and the process exits
             with a non-zero status. There is no reconnection.
    """

    def __init__(
        self,
        message: str = "Could not connect to the database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


def join_fields(fields: List[str]) -> str:
    """
    Join field names into an English list.

    >>> join_fields(["title", "content", "userId"])
    'title, content, and userId'
    """
    if len(fields) <= 1:
        return "".join(fields)
    if len(fields) == 2:
        return f"{fields[0]} and {fields[1]}"
    return f"{', '.join(fields[:-1])}, and {fields[-1]}"
