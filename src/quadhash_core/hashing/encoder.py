"""
src/quadhash_core/hashing/encoder.py
Empaquetador Decimal v1.2.
Colapsa una cadena en un único entero de 64 bits con signo, reservando a cada
byte su propio 'slot' decimal (1, 2 o 3 dígitos) para que nunca colisionen.
"""
import logging
from typing import Union

from .invariants import to_int64

logger = logging.getLogger(__name__)

TextLike = Union[str, bytes, bytearray, memoryview]


def to_bytes(data: TextLike) -> bytes:
    """
    Normaliza la entrada al dominio de bytes crudos.
    - str: se codifica en UTF-8 (un carácter multibyte aporta varios códigos).
    - bytes/bytearray/memoryview: se usan tal cual.
    """
    if isinstance(data, str):
        return data.encode('utf-8')
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")


def slot_width(ch: int) -> int:
    """Multiplicador decimal que abre hueco para el código 'ch'."""
    if ch < 10:
        return 10
    if ch < 100:
        return 100
    return 1000


def pack_digits(data: TextLike) -> int:
    """
    Digit Packer.
    num = num * 10^k + ch, con k = número de dígitos de ch.
    Cada paso se envuelve a 64 bits (complemento a dos): a partir de ~7
    caracteres el acumulador desborda y el resultado puede ser negativo.
    """
    num = 0
    wrapped = False
    for ch in to_bytes(data):
        raw = num * slot_width(ch) + ch
        num = to_int64(raw)
        if num != raw:
            wrapped = True

    if wrapped:
        logger.debug("Packed accumulator wrapped to %d", num)
    return num
