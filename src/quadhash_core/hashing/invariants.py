"""
src/quadhash_core/hashing/invariants.py
Geometría de 64 bits y Aritmética de Anfitrión.
Define las máscaras, constantes de mezcla y la semántica entera tipo C
(truncamiento hacia cero, desbordamiento en complemento a dos).
"""

# =============================================================================
# GEOMETRÍA DE 64 BITS
# =============================================================================
BITS_WORD = 64

MASK_64   = 0xFFFFFFFFFFFFFFFF
SIGN_BIT  = 1 << 63
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# =============================================================================
# CONSTANTES DE MEZCLA (Finalizador)
# =============================================================================
GOLDEN_SALT = 0x9E3779B97F4A7C15  # Expansión del número áureo
FMIX_C1     = 0xFF51AFD7ED558CCD
FMIX_C2     = 0xC4CEB9FE1A85EC53
FMIX_SHIFT  = 33

# =============================================================================
# EMPAQUETADO
# =============================================================================
QUAD_RADIX      = 1_000_000  # RRRRRR IIIIII
DEGENERATE_QUAD = 0          # Valor de respaldo cuando 2a == 0
HEX_WIDTH       = 16


def to_int64(value: int) -> int:
    """Proyecta un entero arbitrario al rango con signo de 64 bits (wrap)."""
    value &= MASK_64
    return value - (1 << 64) if value & SIGN_BIT else value


def to_uint64(value: int) -> int:
    """Proyecta un entero arbitrario al rango sin signo de 64 bits."""
    return value & MASK_64


def c_div(a: int, b: int) -> int:
    """
    División entera con truncamiento hacia cero.
    Python redondea hacia -inf con //, aquí replicamos la semántica del anfitrión.
    """
    if b == 0:
        raise ZeroDivisionError("c_div by zero")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def c_mod(a: int, b: int) -> int:
    """Resto con el signo del dividendo: a == b * c_div(a, b) + c_mod(a, b)."""
    return a - b * c_div(a, b)
