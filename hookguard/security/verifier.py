from typing import Mapping, Optional

from hookguard.models.keyring import KeyRing
from hookguard.models.verification import FailureReason, VerificationResult
from hookguard.security.canonical import canonicalize
from hookguard.security.signer import compute_digest, decode_signature, digests_match


def verify(
    url: str,
    params: Optional[Mapping[str, str]],
    signature: Optional[str],
    keyring: KeyRing,
) -> VerificationResult:
    """
    Verifica la firma de un webhook contra todas las claves del KeyRing.

    - Sin firma -> MISSING_SIGNATURE (no se calcula ningún HMAC)
    - Firma no decodificable -> MALFORMED_SIGNATURE
    - Ninguna clave coincide -> NO_KEY_MATCHED
    - La primera clave que coincide gana; se devuelve su posición.

    Nunca lanza por entradas mal formadas y no tiene efectos colaterales.
    """
    if signature is None or not signature.strip():
        return VerificationResult.failure(FailureReason.MISSING_SIGNATURE)

    decoded = decode_signature(signature.strip())
    if decoded is None:
        return VerificationResult.failure(FailureReason.MALFORMED_SIGNATURE)

    try:
        canonical = canonicalize(url, params)
    except UnicodeEncodeError:
        # lone surrogates have no UTF-8 form, so no sender could have signed them
        return VerificationResult.failure(FailureReason.NO_KEY_MATCHED)

    for index, key in enumerate(keyring.signing_keys):
        if digests_match(compute_digest(canonical, key), decoded):
            return VerificationResult.success(index)

    return VerificationResult.failure(FailureReason.NO_KEY_MATCHED)
