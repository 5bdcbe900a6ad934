from typing import Iterable, Tuple, Union

from pydantic import BaseModel, ConfigDict, SecretBytes, field_validator


class SigningKey(BaseModel):
    """
    Secreto compartido con el emisor del webhook.
    SecretBytes evita que el valor aparezca en repr, logs o serialización.
    """

    model_config = ConfigDict(frozen=True)

    secret: SecretBytes

    @field_validator("secret")
    @classmethod
    def _not_empty(cls, value: SecretBytes) -> SecretBytes:
        if not value.get_secret_value():
            raise ValueError("signing key must not be empty")
        return value

    @classmethod
    def from_value(cls, value: Union[str, bytes]) -> "SigningKey":
        if isinstance(value, str):
            value = value.encode("utf-8")
        return cls(secret=value)

    def reveal(self) -> bytes:
        return self.secret.get_secret_value()


class KeyRing(BaseModel):
    """
    Conjunto ordenado e inmutable de claves válidas.
    Durante una rotación conviven la clave vieja y la nueva.
    """

    model_config = ConfigDict(frozen=True)

    signing_keys: Tuple[SigningKey, ...]

    @field_validator("signing_keys")
    @classmethod
    def _at_least_one(cls, value: Tuple[SigningKey, ...]) -> Tuple[SigningKey, ...]:
        if not value:
            raise ValueError("keyring needs at least one signing key")
        return value

    @classmethod
    def from_secrets(cls, secrets: Iterable[Union[str, bytes]]) -> "KeyRing":
        return cls(signing_keys=tuple(SigningKey.from_value(s) for s in secrets))

    def __len__(self) -> int:
        return len(self.signing_keys)
