"""
src/quadhash_core/hashing/arithmetic.py
Primitivas Enteras: conteo de dígitos, potencias de 10 y raíz cuadrada entera.
"""
from .invariants import to_int64


def digit_count(num: int) -> int:
    """
    Número de dígitos decimales de 'num'.
    Caso especial: 0 tiene 1 dígito. Un valor negativo (acumulador desbordado)
    no entra en el bucle y cuenta 0 dígitos.
    """
    if num == 0: return 1
    digits = 0
    while num > 0:
        num //= 10
        digits += 1
    return digits


def pow10(n: int) -> int:
    """10^n (n >= 0) con multiplicación envuelta a 64 bits."""
    r = 1
    while n > 0:
        r = to_int64(r * 10)
        n -= 1
    return r


def isqrt(n: int) -> int:
    """
    Raíz cuadrada entera por Newton: floor(sqrt(n)).
    Arranca en x = n y desciende monótonamente hasta que y deja de mejorar.
    """
    if n < 0:
        raise ValueError(f"isqrt() of negative number: {n}")
    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x
