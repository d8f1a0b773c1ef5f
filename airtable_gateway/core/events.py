"""
Logging y manejadores de inicio/cierre de la aplicacion.
"""
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

from fastapi import FastAPI
from loguru import logger

from airtable_gateway.core.config import Settings


def configure_logging(level: str = "INFO") -> None:
    """
    Reemplaza el sink por defecto de loguru por stderr con el nivel pedido.
    Se llama al arrancar y otra vez con el LOG_LEVEL ya cargado.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def build_lifespan(settings: Settings) -> Callable[[FastAPI], AsyncIterator[None]]:
    """
    Construye el lifespan de la app.
    
    Args:
        settings: Configuracion ya validada
        
    Returns:
        Callable: Context manager asincrono para FastAPI(lifespan=...)
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        file_sink_id = await startup_handler(app, settings)
        try:
            yield
        finally:
            await shutdown_handler(app, file_sink_id)
    
    return lifespan


async def startup_handler(app: FastAPI, settings: Settings) -> Optional[int]:
    """
    Inicializa recursos al inicio de la aplicacion.
    
    Returns:
        Optional[int]: id del sink de archivo de loguru, si se configuro
    """
    logger.info(f"Iniciando {settings.APP_NAME}")
    
    file_sink_id = None
    if settings.LOG_FILE:
        file_sink_id = logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            level=settings.LOG_LEVEL.upper()
        )
    
    if settings.ENABLE_DEBUG_ENDPOINT:
        logger.warning("CONFIG: /debug habilitado - expone largo y prefijo del secreto")
    
    logger.info(f"Tabla Airtable: {settings.AIRTABLE_BASE_ID}/{settings.AIRTABLE_TABLE_NAME}")
    logger.success("Aplicacion iniciada correctamente")
    _print_available_urls(settings)
    return file_sink_id


def _print_available_urls(settings: Settings) -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    base_url = settings.access_url
    
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONIBLES:</green></bold>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/health</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Tools:       {base_url}/tools</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Test with:   curl {base_url}/health</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")


async def shutdown_handler(app: FastAPI, file_sink_id: Optional[int] = None) -> None:
    """Libera recursos al cerrar la aplicacion."""
    logger.info("Cerrando aplicacion...")
    
    await app.state.airtable_client.close()
    logger.info("Cliente de Airtable cerrado")
    
    logger.success("Aplicacion cerrada correctamente")
    if file_sink_id is not None:
        logger.remove(file_sink_id)
