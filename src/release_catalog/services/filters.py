"""Translate release query parameters into SQL predicates."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime

from sqlalchemy import ColumnElement

from release_catalog.models.release import Release

logger = logging.getLogger(__name__)

PAST = "past"
UPCOMING = "upcoming"


def get_today() -> date:
    """Dependency returning the current UTC calendar date."""
    return datetime.now(UTC).date()


def _present(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _parse_date_bound(name: str, value: str | None) -> date | None:
    """Parse a YYYY-MM-DD bound, ignoring values that are not valid dates."""
    value = _present(value)
    if value is None:
        return None

    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.debug("Ignoring malformed %r bound: %r", name, value)
        return None


@dataclass(frozen=True)
class ReleaseFilters:
    """Conjunction of the release predicates requested by a caller.

    Fields left as None are not applied.
    """

    today: date
    timeframe: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    release_type: str | None = None
    label: str | None = None

    @classmethod
    def from_params(
        cls,
        today: date,
        filter: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        release_type: str | None = None,
        label: str | None = None,
    ) -> "ReleaseFilters":
        """Build filters from raw query values.

        Unrecognized timeframe values and malformed dates are dropped.
        """
        timeframe = filter if filter in (PAST, UPCOMING) else None
        return cls(
            today=today,
            timeframe=timeframe,
            date_from=_parse_date_bound("from", date_from),
            date_to=_parse_date_bound("to", date_to),
            release_type=_present(release_type),
            label=_present(label),
        )

    def clauses(self) -> list[ColumnElement[bool]]:
        """Return one WHERE clause per supplied predicate."""
        clauses: list[ColumnElement[bool]] = []

        if self.timeframe == PAST:
            clauses.append(Release.release_date < self.today)
        elif self.timeframe == UPCOMING:
            clauses.append(Release.release_date >= self.today)

        if self.date_from is not None:
            clauses.append(Release.release_date >= self.date_from)
        if self.date_to is not None:
            clauses.append(Release.release_date <= self.date_to)

        if self.release_type is not None:
            clauses.append(Release.release_type == self.release_type)
        if self.label is not None:
            clauses.append(Release.label == self.label)

        return clauses
