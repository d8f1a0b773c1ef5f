"""
Endpoints publicos: health checks y debug.
"""
from fastapi import APIRouter, Depends

from airtable_gateway.api.dependencies.deps import get_settings
from airtable_gateway.application.dto.health_dto import (
    DebugInfoResponseDTO,
    HealthResponseDTO,
    ServiceHealthResponseDTO,
)
from airtable_gateway.core.config import Settings
from airtable_gateway.shared.exceptions.domain import FeatureDisabledException
from airtable_gateway.shared.utils.datetime_utils import DateTimeUtils

SECRET_PREVIEW_LENGTH = 5

router = APIRouter(tags=["Health"])


@router.get("/", response_model=ServiceHealthResponseDTO)
async def root(settings: Settings = Depends(get_settings)) -> ServiceHealthResponseDTO:
    """Estado del servicio con su nombre."""
    return ServiceHealthResponseDTO(
        service=settings.APP_NAME,
        timestamp=DateTimeUtils.now_iso(),
    )


@router.get("/health", response_model=HealthResponseDTO)
async def health_check() -> HealthResponseDTO:
    """Endpoint para verificar el estado de la aplicacion."""
    return HealthResponseDTO(timestamp=DateTimeUtils.now_iso())


@router.get("/debug", response_model=DebugInfoResponseDTO, include_in_schema=False)
async def debug_info(settings: Settings = Depends(get_settings)) -> DebugInfoResponseDTO:
    """
    Indica si el secreto del servidor esta configurado, su largo y sus
    primeros caracteres. Solo disponible con ENABLE_DEBUG_ENDPOINT=true.
    """
    if not settings.ENABLE_DEBUG_ENDPOINT:
        raise FeatureDisabledException("debug")
    
    secret = settings.MCP_SERVER_SECRET
    return DebugInfoResponseDTO(
        hasSecret=bool(secret),
        secretLength=len(secret) if secret else 0,
        secretPreview=f"{secret[:SECRET_PREVIEW_LENGTH]}..." if secret else "undefined",
    )
