"""Health check endpoint."""

from fastapi import APIRouter
from tabsense_ml_contracts import HealthResponse

from tabsense_ml import __version__
from tabsense_ml.api.dependencies import InfraDep

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(infra: InfraDep) -> HealthResponse:
    """Report service and model status without triggering a model load."""
    handle = infra.handle
    if handle.is_loaded:
        status = "ok"
    elif handle.is_loading:
        status = "loading"
    else:
        status = "cold"

    return HealthResponse(
        status=status,
        version=__version__,
        model_name=handle.model_name,
        model_loaded=handle.is_loaded,
        cache_backend=infra.settings.cache_backend,
    )
