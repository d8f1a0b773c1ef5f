"""
Dependencias de FastAPI.

Todo lo que se inyecta sale de app.state, cargado una vez en
create_application(); ningun handler lee variables de entorno.
"""
from typing import Optional

from fastapi import Depends, Header, Request

from airtable_gateway.application.use_cases.tool_use_cases import ToolUseCases
from airtable_gateway.core.config import Settings
from airtable_gateway.core.security import BearerTokenVerifier
from airtable_gateway.shared.exceptions.auth import UnauthorizedException


def get_settings(request: Request) -> Settings:
    """Configuracion inmutable de la app."""
    return request.app.state.settings


def get_token_verifier(request: Request) -> BearerTokenVerifier:
    return request.app.state.token_verifier


def get_tool_use_cases(request: Request) -> ToolUseCases:
    """
    Dependencia para obtener los casos de uso de herramientas.
    
    Returns:
        ToolUseCases: Instancia compartida creada al construir la app
    """
    return request.app.state.tool_use_cases


def require_bearer_token(
    authorization: Optional[str] = Header(default=None),
    verifier: BearerTokenVerifier = Depends(get_token_verifier),
) -> None:
    """
    Corta la peticion con 401 si el token bearer no coincide.
    
    Raises:
        UnauthorizedException: Header ausente o distinto
    """
    if not verifier.verify(authorization):
        raise UnauthorizedException()
