import logging

from fastapi import HTTPException
from pydantic import ValidationError

from hookguard.config import Settings, get_settings


def get_app_settings() -> Settings:
    try:
        return get_settings()
    except (RuntimeError, ValidationError) as e:
        logging.error(f"Error loading settings: {e}")
        raise HTTPException(status_code=500, detail="Server misconfiguration")
