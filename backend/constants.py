"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class CategoryRules:
    """Validation limits and messages for the Category aggregate"""

    NAME_MIN_LENGTH = 3
    NAME_MAX_LENGTH = 255

    NAME_NULL = "'name' should not be null"
    NAME_EMPTY = "'name' should not be empty"
    NAME_LENGTH = f"'name' must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"

    SOFT_DELETE_INVARIANT = "'deleted_at' must be set if and only if the category is inactive"


class SearchDefaults:
    """Defaults for paginated listings"""

    PAGE = 0
    PER_PAGE = 10
    MAX_PER_PAGE = 1000
    SORT = "name"
    DIRECTION = "asc"

    # Accepted sort keys mapped to CategoryModel column names
    SORTABLE_FIELDS = {
        "name": "name",
        "description": "description",
        "active": "active",
        "isActive": "active",
        "is_active": "active",
        "createdAt": "created_at",
        "created_at": "created_at",
        "updatedAt": "updated_at",
        "updated_at": "updated_at",
    }


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"  # Listen on all interfaces by default
    PORT = 8080
    API_PREFIX = "/api"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
