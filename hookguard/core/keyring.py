import logging
from typing import Optional

from hookguard.config import get_settings, load_settings
from hookguard.models.keyring import KeyRing
from hookguard.security.keyring_store import KeyRingStore

logger = logging.getLogger("keyring")

_store: Optional[KeyRingStore] = None


def init_keyring() -> KeyRingStore:
    global _store
    if _store is not None:
        return _store

    settings = get_settings()
    _store = KeyRingStore(KeyRing.from_secrets(settings.auth_tokens))
    logger.info("Keyring initialized with %d auth token(s)", len(_store.current))
    return _store


def get_store() -> KeyRingStore:
    if _store is None:
        return init_keyring()
    return _store


def reload_keyring() -> KeyRing:
    """
    Relee la configuración y reemplaza el KeyRing completo.
    Si la configuración nueva es inválida se mantiene el KeyRing anterior.
    """
    store = get_store()
    settings = load_settings()
    keyring = KeyRing.from_secrets(settings.auth_tokens)
    store.replace(keyring)
    get_settings.cache_clear()
    logger.info("Keyring reloaded with %d auth token(s)", len(keyring))
    return keyring


def reset_keyring() -> None:
    global _store
    _store = None
