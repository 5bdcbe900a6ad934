import logging

from fastapi import HTTPException
from pydantic import ValidationError

from hookguard.core.keyring import get_store
from hookguard.security.keyring_store import KeyRingStore


def get_keyring_store() -> KeyRingStore:
    try:
        return get_store()
    except (RuntimeError, ValidationError) as e:
        logging.error(f"Error initializing keyring: {e}")
        raise HTTPException(status_code=500, detail="Server misconfiguration")
