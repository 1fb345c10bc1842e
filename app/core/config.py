"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del backend.
- Agrupa ajustes por área: App, CORS, Mongo, Auth/JWT, Paginación, Logging.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from pathlib import Path

# Resuelve el .env ubicado en la raíz del backend (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Academy Hub API"
    api_prefix: str = "/api"

    # CORS (cliente móvil/web en localhost)
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173", "http://localhost:8080"]
    cors_allow_any: bool = False  # Permite todos los orígenes (usa con cuidado)

    # Mongo
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "academy_db"
    # TLS relax options (dev only)
    mongo_tls_insecure: bool = False  # allows invalid certs
    mongo_tls_allow_invalid_hostnames: bool = False

    # Auth / JWT (tokens emitidos por la plataforma de auth alojada)
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    jwt_audience: str | None = "authenticated"

    # Paginación (equivalente del scroll infinito del cliente)
    page_size_default: int = Field(
        20,
        validation_alias=AliasChoices("ACADEMY_PAGE_SIZE", "PAGE_SIZE_DEFAULT"),
    )
    page_size_max: int = Field(
        100,
        validation_alias=AliasChoices("ACADEMY_PAGE_SIZE_MAX", "PAGE_SIZE_MAX"),
    )

    # Logging
    log_level: str = "INFO"

    # --- Utilidades derivadas / helpers ---
    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final (excepto cuando es solo '/')
        - Si está vacío, devuelve ""
        """
        pref = (self.api_prefix or "").strip()
        if not pref:
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        if len(pref) > 1 and pref.endswith('/'):
            pref = pref[:-1]
        return pref

    @property
    def auth_configured(self) -> bool:
        return bool(self.jwt_secret)

    def clamp_page_size(self, page_size: int | None) -> int:
        """Aplica default y tope a un tamaño de página recibido por query."""
        if not page_size or page_size < 1:
            return self.page_size_default
        return min(page_size, self.page_size_max)

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
    )


settings = Settings()
