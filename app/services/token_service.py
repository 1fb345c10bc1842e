"""
Verificación de access tokens JWT.

Los tokens los emite la plataforma de auth alojada (HS256 con secreto compartido);
esta API solo los valida. Claims usados: sub(user_id), email, role, aud, exp.
"""
from typing import Any, Dict

import jwt as pyjwt

from app.core.config import settings


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida firma/expiración/audiencia. Devuelve payload.
    """
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET no configurado")
    return pyjwt.decode(
        token,
        key=settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
        options={"verify_aud": bool(settings.jwt_audience)},
    )
