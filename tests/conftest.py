from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from app.api.deps import CurrentUser, get_current_user
from app.core.config import settings
from app.main import app


TEST_SECRET = "test-secret-with-at-least-32-bytes!"


@pytest.fixture
def client():
    # Sin `with`: no dispara startup (no intenta conectar a Mongo)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    app.dependency_overrides[get_current_user] = lambda: CurrentUser(id="u1", email="parent@example.com")
    return client


@pytest.fixture
def api():
    return settings.api_prefix_normalized


@pytest.fixture
def make_token(monkeypatch):
    """Emite tokens como la plataforma de auth (HS256, aud, exp) con un secreto de pruebas."""
    monkeypatch.setattr(settings, "jwt_secret", TEST_SECRET)

    def _make(user_id, email=None, role="authenticated", minutes=60):
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=minutes)).timestamp()),
        }
        if settings.jwt_audience:
            payload["aud"] = settings.jwt_audience
        return jwt.encode(payload, TEST_SECRET, algorithm=settings.jwt_algorithm)

    return _make
