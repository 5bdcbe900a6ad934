from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class FailureReason(str, Enum):
    MISSING_SIGNATURE = "missing_signature"
    MALFORMED_SIGNATURE = "malformed_signature"
    NO_KEY_MATCHED = "no_key_matched"


class VerificationResult(BaseModel):
    """
    Veredicto de una verificación de firma.

    - Éxito: ``ok=True`` y ``matched_key_index`` con la posición de la clave.
    - Fallo: ``ok=False`` y ``reason``; nunca incluye índice de clave.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    matched_key_index: Optional[int] = None
    reason: Optional[FailureReason] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "VerificationResult":
        if self.ok and (self.matched_key_index is None or self.reason is not None):
            raise ValueError("success needs a key index and no reason")
        if not self.ok and (self.reason is None or self.matched_key_index is not None):
            raise ValueError("failure needs a reason and no key index")
        return self

    @classmethod
    def success(cls, matched_key_index: int) -> "VerificationResult":
        return cls(ok=True, matched_key_index=matched_key_index)

    @classmethod
    def failure(cls, reason: FailureReason) -> "VerificationResult":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok
