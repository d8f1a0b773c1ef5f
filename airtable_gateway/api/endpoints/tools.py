"""
Endpoints de herramientas: catalogo e invocacion.

Ambos requieren el token bearer. Una invocacion que falla en Airtable o con
un nombre desconocido responde 200 con isError=true; solo un error fuera
del caso de uso responde 500.
"""
import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from airtable_gateway.api.dependencies.deps import get_tool_use_cases, require_bearer_token
from airtable_gateway.application.dto.tool_dto import (
    ToolErrorResponseDTO,
    ToolListResponseDTO,
    ToolResultDTO,
)
from airtable_gateway.application.tools.registry import ToolRegistry
from airtable_gateway.application.use_cases.tool_use_cases import ToolUseCases
from airtable_gateway.shared.exceptions.domain import InvalidRequestBodyException


router = APIRouter(
    prefix="/tools",
    tags=["Tools"],
    dependencies=[Depends(require_bearer_token)],
)


async def _read_arguments(request: Request) -> Dict[str, Any]:
    """
    Lee el body como objeto JSON de argumentos.
    Un body vacio equivale a {}.
    
    Raises:
        InvalidRequestBodyException: Si el body no es JSON o no es un objeto
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise InvalidRequestBodyException() from e
    if not isinstance(payload, dict):
        raise InvalidRequestBodyException()
    return payload


@router.get(
    "",
    response_model=ToolListResponseDTO,
    summary="Listar herramientas disponibles",
)
async def list_tools() -> ToolListResponseDTO:
    return ToolListResponseDTO(tools=ToolRegistry.list_tools())


@router.post(
    "/{tool_name}",
    response_model=ToolResultDTO,
    status_code=status.HTTP_200_OK,
    summary="Ejecutar una herramienta",
)
async def invoke_tool(
    tool_name: str,
    request: Request,
    use_cases: ToolUseCases = Depends(get_tool_use_cases),
):
    """
    Ejecuta la herramienta indicada con el body como argumentos.
    
    Returns:
        ToolResultDTO: Resultado de la herramienta (revisar isError)
    """
    arguments = await _read_arguments(request)
    
    try:
        return await use_cases.execute(tool_name, arguments)
    except Exception as e:
        logger.exception(f"Error ejecutando {tool_name}")
        message = str(e) or e.__class__.__name__
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ToolErrorResponseDTO.from_message(message).model_dump(),
        )
