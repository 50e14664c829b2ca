"""
src/quadhash_core/hashing/utils.py
Finalizador de Avalancha.
Variante del fmix64 de MurmurHash3 con sal áurea sobre el segundo operando.
"""
from .invariants import (
    MASK_64, GOLDEN_SALT, FMIX_C1, FMIX_C2, FMIX_SHIFT, HEX_WIDTH, to_uint64,
)


def avalanche_mix(num: int, quad: int) -> int:
    """
    Combina el entero empaquetado y el cuadrático en un valor de 64 bits.
    Garantiza dispersión uniforme y determinismo.
    """
    # 1. Plegado con sal
    h = to_uint64(num) ^ ((to_uint64(quad) * GOLDEN_SALT) & MASK_64)

    # 2. Avalanche Finalizer
    h ^= (h >> FMIX_SHIFT)
    h = (h * FMIX_C1) & MASK_64
    h ^= (h >> FMIX_SHIFT)
    h = (h * FMIX_C2) & MASK_64
    h ^= (h >> FMIX_SHIFT)

    return h


def to_hex(h: int) -> str:
    """16 dígitos hexadecimales en minúscula, con ceros a la izquierda."""
    return format(h & MASK_64, f'0{HEX_WIDTH}x')
