"""
src/quadhash_core/hashing/quadratic.py
Artilugio Cuadrático v2.0.
Parte el entero empaquetado en tres trozos decimales, los trata como los
coeficientes de a·x² + b·x + c = 0 y pliega las dos raíces (reales o
complejas) en un segundo entero de 64 bits.

Toda la aritmética replica la del anfitrión de 64 bits: truncamiento hacia
cero y desbordamiento en complemento a dos.
"""
from typing import NamedTuple

from .arithmetic import isqrt, pow10
from .invariants import QUAD_RADIX, to_int64, c_div, c_mod


class Chunks(NamedTuple):
    """Coeficientes (a, b, c) extraídos de los dígitos del entero."""
    a: int
    b: int
    c: int


class RootPair(NamedTuple):
    """Magnitudes de las raíces. Ambas no negativas tras el plegado."""
    real: int
    imag: int

    def pack(self) -> int:
        """RRRRRR IIIIII -> real * 10^6 + imag."""
        return to_int64(self.real * QUAD_RADIX + self.imag)


class DegenerateInputError(ValueError):
    """
    El coeficiente principal es nulo (2a == 0): la ecuación no es cuadrática
    y la división por 2a no está definida.
    """

    def __init__(self, chunks: Chunks):
        self.chunks = chunks
        super().__init__(f"Degenerate quadratic: leading coefficient 2a == 0 for {tuple(chunks)}")


class QuadraticMixer:
    """
    Calculadora de raíces enteras sin floats.
    Métodos estáticos: no hay estado entre llamadas.
    """
    __slots__ = ()

    @staticmethod
    def split_chunks(num: int, digits: int) -> Chunks:
        """
        div = digits / 3, rem = digits - 2*div.
        c = num mod 10^div, b = (num / 10^div) mod 10^div, a = num / 10^(div+rem).
        """
        div = digits // 3
        rem = digits - 2 * div

        p1 = pow10(div)
        p2 = pow10(div + rem)

        c = c_mod(num, p1)
        b = c_mod(c_div(num, p1), p1)
        a = c_div(num, p2)
        return Chunks(a, b, c)

    @staticmethod
    def solve(chunks: Chunks) -> RootPair:
        """
        Resuelve a·x² + b·x + c = 0 en enteros.
        - Discriminante negativo: real = -b / 2a, imag = isqrt(|D|).
        - Discriminante no negativo: (min, max) de base ± isqrt(D) / 2a.
        Lanza DegenerateInputError si 2a se anula (tras envolver a 64 bits).
        """
        a, b, c = chunks
        two_a = to_int64(2 * a)
        if two_a == 0:
            raise DegenerateInputError(chunks)

        discriminant = to_int64(b * b - 4 * a * c)
        base = c_div(to_int64(-b), two_a)

        if discriminant < 0:
            imag_part = isqrt(to_int64(-discriminant))
            real_part = base
        else:
            step = c_div(isqrt(discriminant), two_a)
            root1 = to_int64(base + step)
            root2 = to_int64(base - step)
            real_part = min(root1, root2)
            imag_part = max(root1, root2)

        # Magnitudes (abs envuelto: INT64_MIN se queda igual, como en el anfitrión)
        if real_part < 0: real_part = to_int64(-real_part)
        if imag_part < 0: imag_part = to_int64(-imag_part)

        return RootPair(real_part, imag_part)

    @staticmethod
    def mix(num: int, digits: int) -> int:
        """Trocea, resuelve y empaqueta. Propaga DegenerateInputError."""
        chunks = QuadraticMixer.split_chunks(num, digits)
        return QuadraticMixer.solve(chunks).pack()


# Atajos funcionales
split_chunks = QuadraticMixer.split_chunks
solve_quadratic = QuadraticMixer.solve
quadratic_division = QuadraticMixer.mix
