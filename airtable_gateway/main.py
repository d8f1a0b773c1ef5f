"""
Punto de entrada principal de la aplicacion FastAPI.
Configura la aplicacion, middlewares, rutas y eventos.
"""
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from airtable_gateway import __version__
from airtable_gateway.api.endpoints import health, tools
from airtable_gateway.api.middlewares.error_handler import ErrorHandlerMiddleware
from airtable_gateway.application.use_cases.tool_use_cases import ToolUseCases
from airtable_gateway.core.config import (
    REQUIRED_VARIABLES,
    Settings,
    get_cors_origins,
    load_settings,
)
from airtable_gateway.core.events import build_lifespan, configure_logging
from airtable_gateway.core.security import BearerTokenVerifier
from airtable_gateway.infrastructure.external.airtable import (
    AirtableClient,
    AirtableCredentials,
)
from airtable_gateway.shared.exceptions.base import AppException
from airtable_gateway.shared.exceptions.config import ConfigurationException


def build_airtable_client(settings: Settings) -> AirtableClient:
    """Crea el cliente de Airtable a partir de la configuracion."""
    credentials = AirtableCredentials(
        token=settings.AIRTABLE_API_TOKEN,
        base_id=settings.AIRTABLE_BASE_ID,
        table_name=settings.AIRTABLE_TABLE_NAME,
    )
    return AirtableClient(
        credentials,
        base_url=settings.AIRTABLE_API_URL,
        timeout_s=settings.AIRTABLE_TIMEOUT_SECONDS,
    )


def create_application(
    settings: Optional[Settings] = None,
    airtable_client: Optional[AirtableClient] = None,
) -> FastAPI:
    """
    Factory para crear y configurar la aplicacion FastAPI.
    
    Args:
        settings: Configuracion ya validada; si es None se carga del entorno
        airtable_client: Cliente a usar (tests); por defecto se crea uno
    
    Returns:
        FastAPI: Instancia configurada de la aplicacion
    
    Raises:
        ConfigurationException: Si settings es None y falta configuracion
    """
    if settings is None:
        settings = load_settings()
    if airtable_client is None:
        airtable_client = build_airtable_client(settings)
    
    application = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Gateway HTTP de herramientas CRUD sobre una tabla de Airtable",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=build_lifespan(settings),
    )
    
    # Estado compartido (solo lectura durante las peticiones)
    application.state.settings = settings
    application.state.airtable_client = airtable_client
    application.state.token_verifier = BearerTokenVerifier(settings.MCP_SERVER_SECRET)
    application.state.tool_use_cases = ToolUseCases(airtable_client)
    
    # Configurar CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(settings.CORS_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Middleware personalizado para manejo de errores
    application.add_middleware(ErrorHandlerMiddleware)
    
    application.include_router(health.router)
    application.include_router(tools.router)
    
    # Manejador global de excepciones personalizadas
    @application.exception_handler(AppException)
    async def app_exception_handler(request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_body()
        )
    
    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )
    
    return application


def run() -> None:
    """
    Arranca el servidor con uvicorn.
    
    Si falta configuracion requerida, termina con status 1 antes de abrir
    ningun socket.
    """
    import uvicorn
    
    configure_logging()
    logger.info("Starting HTTP MCP Airtable Server...")
    
    try:
        settings = load_settings()
    except ConfigurationException as e:
        logger.error(e.message)
        logger.error(f"Required: {', '.join(REQUIRED_VARIABLES)}")
        sys.exit(1)
    
    configure_logging(settings.LOG_LEVEL)
    
    uvicorn.run(
        create_application(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
