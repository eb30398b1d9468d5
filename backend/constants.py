"""
Application-wide constants.

This module centralizes the magic strings and numbers used by the catalog
query layer and the HTTP surface.
"""


class ProductSort:
    """Sort tokens accepted by the product listing endpoint; anything else sorts by name"""

    PRICE_ASC = "PriceAsc"
    PRICE_DESC = "PriceDesc"


class PaginationDefaults:
    """Page window bounds for product listings"""

    DEFAULT_PAGE_INDEX = 1
    DEFAULT_PAGE_SIZE = 5
    MAX_PAGE_SIZE = 10


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8888

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
