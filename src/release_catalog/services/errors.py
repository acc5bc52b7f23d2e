"""Errors raised by the catalog and rendered by the application handlers."""

from release_catalog.schemas.common import ResponseShape


class CatalogError(Exception):
    """Base exception for caller-visible catalog errors.

    The response shape travels with the error so the handler can render the
    body the endpoint family expects.
    """

    status_code: int = 500
    title: str = "Internal Server Error"

    def __init__(
        self,
        message: str,
        shape: ResponseShape = ResponseShape.DOCUMENT,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.shape = shape
        self.headers = headers


class NotFoundError(CatalogError):
    """Raised when a requested resource does not exist."""

    status_code = 404
    title = "Not Found"

    def __init__(
        self, message: str = "Resource not found", shape: ResponseShape = ResponseShape.DOCUMENT
    ) -> None:
        super().__init__(message, shape=shape)


class UnauthorizedError(CatalogError):
    """Raised when an endpoint requires a caller identity and none was resolved."""

    status_code = 401
    title = "Unauthorized"

    def __init__(
        self, message: str = "Not authenticated", shape: ResponseShape = ResponseShape.DOCUMENT
    ) -> None:
        super().__init__(message, shape=shape, headers={"WWW-Authenticate": "Bearer"})
