from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from travelhub.config.settings import settings
from travelhub.utils.crud_utils import CrudUtils

router = APIRouter()
fallback_router = APIRouter()

AVAILABLE_ENDPOINTS = [
    "GET /health",
    "GET /destinations",
    "POST /destinations",
    "GET /destinations/:id",
    "PUT /destinations/:id",
    "DELETE /destinations/:id",
    "GET /destinations/:id/hotels",
    "GET /hotels",
    "POST /hotels",
    "GET /hotels/:id",
    "PUT /hotels/:id",
    "DELETE /hotels/:id",
    "GET /hotels/destination/:destinationId",
    "GET /hotels/search/filter",
]

# liveness
@router.get("/health")
def health():
    return {
        "success": True,
        "message": "TravelHub API is running",
        "timestamp": CrudUtils.now(),
        "environment": settings.ENVIRONMENT
    }

# anything not matched above; must be registered last
@fallback_router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def endpoint_not_found(request: Request, path: str):
    # "/api/destinations/" is retried without the slash, keeping method and body
    stripped = request.url.path.rstrip("/")
    if stripped and stripped != request.url.path:
        return RedirectResponse(str(request.url.replace(path=stripped)), status_code=status.HTTP_307_TEMPORARY_REDIRECT)

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "success": False,
            "message": "API endpoint not found",
            "availableEndpoints": [
                f"{method} {settings.API_PREFIX}{endpoint}"
                for method, endpoint in (entry.split(" ", 1) for entry in AVAILABLE_ENDPOINTS)
            ]
        }
    )
