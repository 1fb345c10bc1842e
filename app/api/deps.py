"""
Dependencias reutilizables para routers (FastAPI Depends).

- Autenticación: extrae y valida el access token de la plataforma de auth y
  devuelve un contexto explícito del usuario actual (sin lecturas ambientales).
- Mantener esta capa delgada: sin lógica de negocio pesada.
"""
from dataclasses import dataclass
from typing import Optional
from fastapi import HTTPException, Header
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_503_SERVICE_UNAVAILABLE

from app.core.config import settings
from app.services.token_service import verify_access_token


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: Optional[str] = None
    role: Optional[str] = None


def _bearer(authorization: Optional[str]) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Falta token")
    return authorization.split(" ", 1)[1]


def get_current_user(authorization: Optional[str] = Header(default=None)) -> CurrentUser:
    token = _bearer(authorization)
    if not settings.auth_configured:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Auth no configurada")
    try:
        payload = verify_access_token(token)
    except Exception:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Token inválido")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Token inválido")
    return CurrentUser(id=str(user_id), email=payload.get("email"), role=payload.get("role"))
