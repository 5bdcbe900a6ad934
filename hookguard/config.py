import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEBUG: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

SIGNATURE_HEADER = "X-Twilio-Signature"


class Settings(BaseModel):
    auth_tokens: List[str]
    account_sid: str
    trust_forwarded_headers: bool = True


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def parse_auth_tokens(raw: str) -> List[str]:
    """
    Separa TWILIO_AUTH_TOKEN ("viejo,nuevo") en una lista de secretos.
    Las entradas vacías se conservan para que la validación del KeyRing las rechace.
    """
    return [token.strip() for token in raw.split(",")]


def load_settings() -> Settings:
    auth_token = os.getenv("TWILIO_AUTH_TOKEN")
    account_sid = os.getenv("TWILIO_ACCOUNT_SID")

    if not auth_token:
        raise RuntimeError("TWILIO_AUTH_TOKEN not set")
    if not account_sid:
        raise RuntimeError("TWILIO_ACCOUNT_SID not set")

    return Settings(
        auth_tokens=parse_auth_tokens(auth_token),
        account_sid=account_sid,
        trust_forwarded_headers=_env_flag("TRUST_FORWARDED_HEADERS", "true"),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
