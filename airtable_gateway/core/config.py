"""
Configuracion central del gateway.

Lee variables de entorno (y un .env opcional) una sola vez al arrancar y
las expone como un objeto inmutable que se inyecta en la app y en el
cliente de Airtable. No existe una instancia global: quien arranca el
proceso llama a load_settings() y pasa el resultado hacia abajo.
"""
import json
from typing import List

from pydantic import Field, ValidationError, computed_field
from pydantic_settings import BaseSettings

from airtable_gateway.shared.exceptions.config import ConfigurationException

REQUIRED_VARIABLES = (
    "AIRTABLE_API_TOKEN",
    "AIRTABLE_BASE_ID",
    "AIRTABLE_TABLE_NAME",
    "MCP_SERVER_SECRET",
)


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    
    Las credenciales de Airtable y el secreto del servidor son obligatorios;
    un valor vacio cuenta como ausente.
    """
    
    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="HTTP MCP Airtable Server")
    
    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)
    
    # Credenciales (requeridas)
    AIRTABLE_API_TOKEN: str = Field(..., min_length=1)
    AIRTABLE_BASE_ID: str = Field(..., min_length=1)
    AIRTABLE_TABLE_NAME: str = Field(..., min_length=1)
    MCP_SERVER_SECRET: str = Field(..., min_length=1)
    
    # Cliente de Airtable
    AIRTABLE_API_URL: str = Field(default="https://api.airtable.com/v0")
    # Sin timeout local un upstream colgado mantendria la peticion abierta
    AIRTABLE_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    
    # CORS (acepta lista JSON, lista separada por comas o "*")
    CORS_ORIGINS: str = Field(default="*")
    
    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="")
    
    # Endpoint /debug (expone largo y prefijo del secreto)
    ENABLE_DEBUG_ENDPOINT: bool = Field(default=False)
    
    @computed_field
    @property
    def access_url(self) -> str:
        """URL base para mostrar en logs de arranque."""
        host = "localhost" if self.HOST == "0.0.0.0" else self.HOST
        return f"http://{host}:{self.PORT}"
    
    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
        frozen = True


def load_settings(**overrides) -> Settings:
    """
    Construye y valida la configuracion.
    
    Args:
        overrides: Valores que reemplazan a los del entorno (tests, scripts)
    
    Returns:
        Settings: Configuracion inmutable
    
    Raises:
        ConfigurationException: Si falta alguna variable requerida o alguna
            tiene un valor invalido
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        names: List[str] = []
        for err in exc.errors():
            loc = err.get("loc") or ("?",)
            name = str(loc[0])
            if name not in names:
                names.append(name)
        raise ConfigurationException(names) from exc


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Parsea la configuracion de CORS.
    Acepta "*" para todos los origenes o una lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        # Si no es JSON valido, retornar como lista simple
        return [origin.strip() for origin in cors_string.split(",") if origin.strip()]
