"""
Script para ejecutar el servidor en modo desarrollo (con reload).
"""
import sys

import uvicorn
from loguru import logger

from airtable_gateway.core.config import load_settings
from airtable_gateway.shared.exceptions.config import ConfigurationException


if __name__ == "__main__":
    try:
        settings = load_settings()
    except ConfigurationException as e:
        logger.error(e.message)
        sys.exit(1)

    # factory=True: cada worker de reload vuelve a construir la app desde el entorno
    uvicorn.run(
        "airtable_gateway.main:create_application",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
