import threading

from hookguard.models.keyring import KeyRing


class KeyRingStore:
    """
    Referencia al KeyRing vigente.

    Los lectores toman ``current`` sin bloqueo: siempre obtienen un KeyRing
    completo (viejo o nuevo). ``replace`` cambia la referencia en una sola
    asignación; el lock solo serializa a los escritores.
    """

    def __init__(self, keyring: KeyRing):
        if not isinstance(keyring, KeyRing):
            raise TypeError("KeyRingStore expects a KeyRing")
        self._keyring = keyring
        self._swap_lock = threading.Lock()

    @property
    def current(self) -> KeyRing:
        return self._keyring

    def replace(self, keyring: KeyRing) -> KeyRing:
        """Instala un KeyRing nuevo y devuelve el anterior."""
        if not isinstance(keyring, KeyRing):
            raise TypeError("KeyRingStore expects a KeyRing")
        with self._swap_lock:
            previous = self._keyring
            self._keyring = keyring
        return previous
