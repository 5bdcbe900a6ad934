import pytest

from hookguard.config import get_settings
from hookguard.core.keyring import reset_keyring
from hookguard.models.keyring import KeyRing, SigningKey

OLD_TOKEN = "old-auth-token-1f2e3d"
NEW_TOKEN = "new-auth-token-9a8b7c"


@pytest.fixture
def old_key():
    return SigningKey.from_value(OLD_TOKEN)


@pytest.fixture
def new_key():
    return SigningKey.from_value(NEW_TOKEN)


@pytest.fixture
def rotation_keyring(old_key, new_key):
    """KeyRing durante una rotación: clave vieja y nueva a la vez."""
    return KeyRing(signing_keys=(old_key, new_key))


@pytest.fixture
def twilio_env(monkeypatch):
    """Configura entorno controlado y limpia el estado global entre pruebas."""
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", f"{OLD_TOKEN},{NEW_TOKEN}")
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC0123456789")
    monkeypatch.setenv("TRUST_FORWARDED_HEADERS", "true")
    get_settings.cache_clear()
    reset_keyring()
    yield
    get_settings.cache_clear()
    reset_keyring()
