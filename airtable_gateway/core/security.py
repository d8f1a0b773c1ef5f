"""
Verificacion del token bearer del servidor.

El header Authorization debe ser exactamente "Bearer <MCP_SERVER_SECRET>".
"""

from __future__ import annotations

import hmac
from typing import Optional

BEARER_PREFIX = "Bearer "


class BearerTokenVerifier:
    """
    Compara el header Authorization contra el secreto configurado.

    Usa comparacion en tiempo constante (hmac.compare_digest) para reducir leaks
    por timing.
    """

    def __init__(self, server_secret: str) -> None:
        self._expected_header = f"{BEARER_PREFIX}{server_secret or ''}"
        self._configured = bool(server_secret)

    def is_configured(self) -> bool:
        return self._configured

    def verify(self, authorization: Optional[str]) -> bool:
        if not self._configured or not authorization:
            return False

        # compare_digest sobre bytes: acepta cualquier caracter del header
        return hmac.compare_digest(
            authorization.encode("utf-8"),
            self._expected_header.encode("utf-8"),
        )
