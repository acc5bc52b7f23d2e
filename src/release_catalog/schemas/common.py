"""Enumerations shared by the serializer, the errors and the auth layer."""

from enum import StrEnum


class CallerTier(StrEnum):
    """Visibility tier of the requester, resolved once per request."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"

    @property
    def is_authenticated(self) -> bool:
        return self is CallerTier.AUTHENTICATED


class ResponseShape(StrEnum):
    """Response layout selected with the ``format`` query parameter."""

    FLAT = "flat"
    DOCUMENT = "jsonapi"

    @classmethod
    def from_param(cls, value: str | None) -> "ResponseShape":
        """Parse a ``format`` value, falling back to the resource document."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.DOCUMENT
