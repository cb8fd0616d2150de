import pytest
from cryptography.fernet import Fernet
from fastapi.testclient import TestClient

from app.core.crypto import CredentialCipher
from app.core.dependencies import get_credential_cipher
from app.database.supabase_client import get_supabase, get_supabase_auth
from app.main import app, limiter
from tests.fakes import FakeAuth, FakeSupabase


@pytest.fixture
def fake_auth() -> FakeAuth:
    return FakeAuth()


@pytest.fixture
def store(fake_auth) -> FakeSupabase:
    """Service-role client stand-in."""
    return FakeSupabase(auth=fake_auth)


@pytest.fixture
def auth_client(fake_auth) -> FakeSupabase:
    """Anon-key client stand-in sharing the same identity provider."""
    return FakeSupabase(auth=fake_auth)


@pytest.fixture
def cipher() -> CredentialCipher:
    return CredentialCipher(Fernet.generate_key().decode())


@pytest.fixture
def client(store, auth_client, cipher):
    app.dependency_overrides[get_supabase] = lambda: store
    app.dependency_overrides[get_supabase_auth] = lambda: auth_client
    app.dependency_overrides[get_credential_cipher] = lambda: cipher
    limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client) -> dict:
    resp = client.post("/api/v1/auth/signup", json={
        "email": "ada@example.com",
        "password": "correct horse",
        "full_name": "Ada Lovelace",
    })
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
