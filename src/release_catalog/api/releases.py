"""Release catalog API endpoints.

Two endpoint families share the same handlers:

- ``/public/releases``: authentication optional, fields redacted for
  anonymous callers.
- ``/v1/releases``: authentication required.

Both accept ``format=flat`` for the flat shape; the default is a JSON:API
style resource document.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from release_catalog.config import get_settings
from release_catalog.schemas.common import CallerTier, ResponseShape
from release_catalog.services.errors import NotFoundError
from release_catalog.services.filters import ReleaseFilters, get_today
from release_catalog.services.pagination import PageRequest
from release_catalog.services.repository import ReleaseRepository, get_release_repository
from release_catalog.services.serializer import ReleaseSerializer
from release_catalog.utils.security import OptionalCaller, RequiredCaller

public_router = APIRouter(prefix="/public/releases", tags=["releases"])
v1_router = APIRouter(prefix="/v1/releases", tags=["releases"])


class ReleaseQuery:
    """Raw release listing parameters.

    Kept as strings so malformed values are normalized instead of rejected.
    """

    def __init__(
        self,
        page: str | None = Query(None, description="Page number (defaults to 1)"),
        per_page: str | None = Query(None, description="Items per page (1-100, defaults to 10)"),
        filter: str | None = Query(None, description="past or upcoming"),
        date_from: str | None = Query(None, alias="from", description="Earliest release date"),
        date_to: str | None = Query(None, alias="to", description="Latest release date"),
        release_type: str | None = Query(None, alias="type", description="Release type"),
        label: str | None = Query(None, description="Record label"),
        response_format: str | None = Query(None, alias="format", description="jsonapi or flat"),
    ) -> None:
        self.page = page
        self.per_page = per_page
        self.filter = filter
        self.date_from = date_from
        self.date_to = date_to
        self.release_type = release_type
        self.label = label
        self.response_format = response_format


def _serializer(
    request: Request, route_name: str, response_format: str | None, tier: CallerTier
) -> ReleaseSerializer:
    return ReleaseSerializer(
        shape=ResponseShape.from_param(response_format),
        tier=tier,
        collection_url=str(request.url_for(route_name)),
    )


async def _list_releases(
    request: Request,
    route_name: str,
    params: ReleaseQuery,
    tier: CallerTier,
    repository: ReleaseRepository,
    today: date,
) -> JSONResponse:
    settings = get_settings()
    serializer = _serializer(request, route_name, params.response_format, tier)

    filters = ReleaseFilters.from_params(
        today=today,
        filter=params.filter,
        date_from=params.date_from,
        date_to=params.date_to,
        release_type=params.release_type,
        label=params.label,
    )
    page_request = PageRequest.from_params(
        params.page,
        params.per_page,
        default_per_page=settings.default_per_page,
        max_per_page=settings.max_per_page,
    )

    # Count the full filtered set before slicing out the page
    total_count = await repository.filtered_count(filters)
    # Pages past the end are empty; their offset may not fit in a SQL integer
    if page_request.offset >= total_count:
        releases = []
    else:
        releases = await repository.fetch_page(filters, page_request.offset, page_request.limit)

    return JSONResponse(
        serializer.render_list(releases, page_request.with_total(total_count), str(request.url))
    )


async def _get_release(
    request: Request,
    route_name: str,
    release_id: str,
    response_format: str | None,
    tier: CallerTier,
    repository: ReleaseRepository,
) -> JSONResponse:
    serializer = _serializer(request, route_name, response_format, tier)

    try:
        lookup_id = int(release_id)
    except ValueError:
        lookup_id = None

    release = await repository.find_by_id(lookup_id) if lookup_id is not None else None
    if release is None:
        raise NotFoundError("Release not found", shape=serializer.shape)

    return JSONResponse(serializer.render_one(release))


@public_router.get("", name="public_list_releases")
async def list_public_releases(
    request: Request,
    tier: OptionalCaller,
    params: ReleaseQuery = Depends(),
    repository: ReleaseRepository = Depends(get_release_repository),
    today: date = Depends(get_today),
) -> JSONResponse:
    """List releases.

    Anonymous callers get the public fields only; a valid bearer token
    unlocks catalog numbers, timestamps, albums and artist details.
    """
    return await _list_releases(
        request, "public_list_releases", params, tier, repository, today
    )


@public_router.get("/{release_id}", name="public_get_release")
async def get_public_release(
    request: Request,
    release_id: str,
    tier: OptionalCaller,
    response_format: str | None = Query(None, alias="format", description="jsonapi or flat"),
    repository: ReleaseRepository = Depends(get_release_repository),
) -> JSONResponse:
    """Get a single release, redacted for anonymous callers.

    Raises:
        NotFoundError: If the release does not exist
    """
    return await _get_release(
        request, "public_list_releases", release_id, response_format, tier, repository
    )


@v1_router.get("", name="v1_list_releases")
async def list_releases(
    request: Request,
    tier: RequiredCaller,
    params: ReleaseQuery = Depends(),
    repository: ReleaseRepository = Depends(get_release_repository),
    today: date = Depends(get_today),
) -> JSONResponse:
    """List releases with all fields.

    Requires authentication.
    """
    return await _list_releases(request, "v1_list_releases", params, tier, repository, today)


@v1_router.get("/{release_id}", name="v1_get_release")
async def get_release(
    request: Request,
    release_id: str,
    tier: RequiredCaller,
    response_format: str | None = Query(None, alias="format", description="jsonapi or flat"),
    repository: ReleaseRepository = Depends(get_release_repository),
) -> JSONResponse:
    """Get a single release with all fields.

    Requires authentication.

    Raises:
        NotFoundError: If the release does not exist
    """
    return await _get_release(
        request, "v1_list_releases", release_id, response_format, tier, repository
    )
