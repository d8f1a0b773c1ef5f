"""
DTOs relacionados con herramientas y resultados de invocacion.

Los nombres de campo siguen el formato del wire (camelCase) para que
model_dump() produzca directamente el JSON de respuesta.
"""
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

from airtable_gateway.shared.constants.tool_constants import ERROR_PREFIX


class ToolDescriptorDTO(BaseModel):
    """Descriptor publicado por GET /tools."""
    
    name: str
    description: str
    inputSchema: Dict[str, Any] = Field(default_factory=dict)


class ToolListResponseDTO(BaseModel):
    """DTO de respuesta para el catalogo de herramientas."""
    
    tools: List[ToolDescriptorDTO]


class TextContentDTO(BaseModel):
    """Bloque de contenido de texto."""
    
    type: Literal["text"] = "text"
    text: str


class ToolResultDTO(BaseModel):
    """
    Resultado normalizado de una invocacion.
    
    isError=true no implica un status HTTP de error: el endpoint responde
    200 y el cliente debe revisar este flag.
    """
    
    content: List[TextContentDTO]
    isError: bool = False
    
    @classmethod
    def success(cls, text: str) -> "ToolResultDTO":
        return cls(content=[TextContentDTO(text=text)], isError=False)
    
    @classmethod
    def failure(cls, message: str) -> "ToolResultDTO":
        """Resultado de error; el texto siempre empieza con 'Error: '."""
        return cls(content=[TextContentDTO(text=f"{ERROR_PREFIX}{message}")], isError=True)


class ToolErrorResponseDTO(ToolResultDTO):
    """Cuerpo del 500 cuando la invocacion falla fuera del caso de uso."""
    
    error: str
    isError: bool = True
    
    @classmethod
    def from_message(cls, message: str) -> "ToolErrorResponseDTO":
        return cls(
            error=message,
            content=[TextContentDTO(text=f"{ERROR_PREFIX}{message}")],
            isError=True,
        )
