"""
DTOs de los endpoints publicos (health y debug).
"""
from pydantic import BaseModel


class HealthResponseDTO(BaseModel):
    status: str = "healthy"
    timestamp: str


class ServiceHealthResponseDTO(HealthResponseDTO):
    service: str


class DebugInfoResponseDTO(BaseModel):
    """Estado del secreto del servidor (sin revelarlo completo)."""
    
    hasSecret: bool
    secretLength: int
    secretPreview: str
