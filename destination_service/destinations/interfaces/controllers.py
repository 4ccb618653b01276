"""
Destination Controllers (API Routes)
=====================================

FastAPI routes for the destinations endpoints.

Controllers are thin - they delegate to the application service, log their
own start and outcome, and turn any failure into the uniform 500 payload.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from destination_service.destinations.application import (
    DestinationCreateRequest,
    DestinationResponse,
    DestinationService,
    ErrorResponse,
    ICountryLookupClient,
)
from destination_service.destinations.infrastructure import (
    RestCountriesClient,
    SQLAlchemyDestinationRepository,
)
from destination_service.infrastructure.database import get_session
from destination_service.shared.api import error_response
from destination_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/destinations", tags=["Destinations"])

ERROR_RESPONSES = {
    500: {
        "model": ErrorResponse,
        "description": "Persistence or lookup failure",
        "content": {
            "application/json": {
                "example": {
                    "error": "Internal server error",
                    "details": "Country Lookup: no country matches 'Atlantis'"
                }
            }
        }
    }
}


# ========== Dependencies ==========

def get_lookup_client(request: Request) -> ICountryLookupClient:
    """Lookup client created once in the application lifespan."""
    client = getattr(request.app.state, "lookup_client", None)
    if client is None:
        client = RestCountriesClient()
        request.app.state.lookup_client = client
    return client


async def get_destination_service(
    session: AsyncSession = Depends(get_session),
    lookup_client: ICountryLookupClient = Depends(get_lookup_client)
) -> DestinationService:
    """Get destination service instance."""
    return DestinationService(SQLAlchemyDestinationRepository(session), lookup_client)


def _context(request: Request, **extra) -> dict:
    """Log extras carrying the request correlation ID."""
    return {"correlation_id": getattr(request.state, "correlation_id", None), **extra}


# ========== Route Handlers ==========

@router.get(
    "",
    response_model=List[DestinationResponse],
    summary="List destinations",
    description="All destinations, most recently created first. No pagination.",
    responses=ERROR_RESPONSES
)
async def list_destinations(
    request: Request,
    service: DestinationService = Depends(get_destination_service)
):
    logger.info("GET /api/destinations - Fetching all destinations", extra=_context(request))
    try:
        destinations = await service.list_destinations()
    except Exception as e:
        logger.error(f"GET /api/destinations - Error: {e}", extra=_context(request, error_type=type(e).__name__))
        return error_response(e)

    logger.info(
        f"GET /api/destinations - Fetched {len(destinations)} destinations",
        extra=_context(request)
    )
    return [d.to_dict() for d in destinations]


@router.post(
    "",
    response_model=DestinationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a destination",
    description="""
    Look the country up at the country-information service and store it with
    its capital, population and region.

    **Example Request**:
    ```json
    {"country": "France"}
    ```

    The body is not validated: a missing or non-string `country` is forwarded
    as text. If the lookup fails for any reason nothing is stored and a 500 is
    returned.
    """,
    responses=ERROR_RESPONSES
)
async def create_destination(
    request: Request,
    payload: Any = Body(None, examples=[{"country": "France"}]),
    service: DestinationService = Depends(get_destination_service)
):
    logger.info("POST /api/destinations - Adding new destination", extra=_context(request))
    country = DestinationCreateRequest.from_body(payload).country_name
    try:
        logger.info(
            f"POST /api/destinations - Fetching data for country: {country}",
            extra=_context(request)
        )
        destination = await service.add_destination(country)
    except Exception as e:
        logger.error(f"POST /api/destinations - Error: {e}", extra=_context(request, error_type=type(e).__name__))
        return error_response(e)

    logger.info(
        "POST /api/destinations - Added new destination",
        extra=_context(request, destination=destination.to_dict())
    )
    return destination.to_dict()


@router.delete(
    "/{destination_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a destination",
    description="Deleting an id that does not exist also returns 204.",
    responses=ERROR_RESPONSES
)
async def delete_destination(
    destination_id: str,
    request: Request,
    service: DestinationService = Depends(get_destination_service)
):
    logger.info(f"DELETE /api/destinations/{destination_id} - Deleting destination", extra=_context(request))
    try:
        await service.remove_destination(destination_id)
    except Exception as e:
        logger.error(
            f"DELETE /api/destinations/{destination_id} - Error: {e}",
            extra=_context(request, error_type=type(e).__name__)
        )
        return error_response(e)

    logger.info(f"DELETE /api/destinations/{destination_id} - Destination deleted", extra=_context(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Export router for inclusion in main app
destinations_router = router
