import base64
import binascii
import hashlib
import hmac
from typing import Mapping, Optional

from hookguard.models.keyring import SigningKey
from hookguard.security.canonical import canonicalize

# HMAC-SHA1, fixed by the sender's wire format
DIGEST_ALGORITHM = hashlib.sha1
DIGEST_SIZE = hashlib.sha1().digest_size


def compute_digest(canonical: bytes, key: SigningKey) -> bytes:
    return hmac.new(key.reveal(), msg=canonical, digestmod=DIGEST_ALGORITHM).digest()


def sign(url: str, params: Optional[Mapping[str, str]], key: SigningKey) -> str:
    """
    Firma una petición igual que el emisor: base64 (con padding) del HMAC-SHA1
    sobre la cadena canónica.
    """
    digest = compute_digest(canonicalize(url, params), key)
    return base64.b64encode(digest).decode("ascii")


def decode_signature(signature: str) -> Optional[bytes]:
    """
    Decodifica la cabecera de firma. Devuelve None si no es base64 válido.
    """
    try:
        return base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return None


def digests_match(expected: bytes, candidate: bytes) -> bool:
    # length is public (fixed by the algorithm); content compare is constant-time
    if len(candidate) != len(expected):
        return False
    return hmac.compare_digest(expected, candidate)
