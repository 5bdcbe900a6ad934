from typing import Dict

from pydantic import BaseModel


class VerifiedWebhook(BaseModel):
    url: str
    params: Dict[str, str] = {}
    key_index: int
