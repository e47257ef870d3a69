"""Leitura tolerante de campos de um item JSON não confiável.

Campo ausente ou com tipo errado vira o default do tipo em vez de erro.
Todos os decoders de variante leem o payload exclusivamente por aqui.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def _lookup(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        return None
    return obj.get(key)


def get_str(obj: Any, key: str, default: str = "") -> str:
    """Retorna string ou default."""
    value = _lookup(obj, key)
    return value if isinstance(value, str) else default


def get_int(obj: Any, key: str, default: int = 0) -> int:
    """Retorna inteiro ou default (bool não conta como inteiro)."""
    value = _lookup(obj, key)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def get_float(obj: Any, key: str, default: float = 0.0) -> float:
    """Retorna número como float ou default.

    Inteiro grande demais para float também vira default.
    """
    value = _lookup(obj, key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return default
    try:
        return float(value)
    except OverflowError:
        return default


def get_bool(obj: Any, key: str, default: bool = False) -> bool:
    value = _lookup(obj, key)
    return value if isinstance(value, bool) else default


def get_object(obj: Any, key: str) -> dict[str, Any]:
    """Retorna objeto aninhado; ausente ou inválido vira {}."""
    value = _lookup(obj, key)
    return value if isinstance(value, dict) else {}


def get_list(obj: Any, key: str) -> list[Any]:
    """Retorna array; ausente ou inválido vira []."""
    value = _lookup(obj, key)
    return value if isinstance(value, list) else []


def map_records(obj: Any, key: str, decoder: Callable[[dict[str, Any]], T]) -> list[T]:
    """Aplica decoder a cada elemento do array `key`.

    Elementos que não são objeto são decodificados como {} (todos os
    subcampos no default), preservando a posição no array.
    """
    return [
        decoder(element if isinstance(element, dict) else {})
        for element in get_list(obj, key)
    ]
