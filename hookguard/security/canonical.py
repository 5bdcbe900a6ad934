from typing import Dict, Iterable, Mapping, Optional, Tuple


def _byte_order(name: str) -> bytes:
    return name.encode("utf-8")


def canonicalize(url: str, params: Optional[Mapping[str, str]] = None) -> bytes:
    """
    Construye la cadena canónica que firma el emisor:
    URL + (nombre + valor) de cada parámetro, ordenados por nombre en orden de bytes.
    Sin separadores ni escapado.
    """
    pieces = [url]
    if params:
        for name in sorted(params, key=_byte_order):
            pieces.append(name)
            pieces.append(str(params[name]))
    return "".join(pieces).encode("utf-8")


def collapse_params(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """
    Reduce los pares del cuerpo a un valor por nombre.
    Si un nombre se repite gana la primera aparición.
    """
    params: Dict[str, str] = {}
    for name, value in pairs:
        params.setdefault(name, value)
    return params
