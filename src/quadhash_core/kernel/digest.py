"""
src/quadhash_core/kernel/digest.py
Pipeline de Huella v1.0.
Packer -> Counter -> Mixer -> Finalizer -> hex.

Cada llamada construye su propio resultado (sin búfer compartido), por lo que
las funciones son seguras desde múltiples hilos sin candados.
"""
import logging
from typing import Iterable, List, Optional

from ..hashing.arithmetic import digit_count
from ..hashing.encoder import TextLike, pack_digits
from ..hashing.invariants import DEGENERATE_QUAD
from ..hashing.quadratic import Chunks, DegenerateInputError, QuadraticMixer, RootPair
from ..hashing.utils import avalanche_mix, to_hex

logger = logging.getLogger(__name__)


class Fingerprint:
    """Contenedor inmutable de todas las etapas de un digest."""
    __slots__ = ('packed', 'digits', 'chunks', 'roots', 'quad', 'value', 'degenerate')

    def __init__(self, packed: int, digits: int, chunks: Chunks,
                 roots: Optional[RootPair], quad: int, value: int):
        self.packed = packed
        self.digits = digits
        self.chunks = chunks
        self.roots = roots
        self.quad = quad
        self.value = value
        # Sin raíces = se aplicó el valor de respaldo
        self.degenerate = roots is None

    @property
    def hexdigest(self) -> str:
        return to_hex(self.value)

    def __eq__(self, other):
        if not isinstance(other, Fingerprint):
            return NotImplemented
        return self.value == other.value and self.packed == other.packed

    def __hash__(self):
        return self.value

    def __repr__(self):
        return f"<Fingerprint {self.hexdigest} packed={self.packed} quad={self.quad}>"


def fingerprint(data: TextLike, *, strict: bool = False) -> Fingerprint:
    """
    Ejecuta el pipeline completo y conserva los valores intermedios.
    strict=False: un coeficiente principal nulo aporta quad = DEGENERATE_QUAD.
    strict=True: DegenerateInputError se propaga al llamador.
    """
    num = pack_digits(data)
    digits = digit_count(num)
    chunks = QuadraticMixer.split_chunks(num, digits)

    try:
        roots = QuadraticMixer.solve(chunks)
    except DegenerateInputError:
        if strict:
            raise
        logger.debug("Degenerate chunks %s, using fallback quad=%d", tuple(chunks), DEGENERATE_QUAD)
        roots = None

    quad = roots.pack() if roots is not None else DEGENERATE_QUAD
    return Fingerprint(num, digits, chunks, roots, quad, avalanche_mix(num, quad))


def hash_text(data: TextLike, *, strict: bool = False) -> str:
    """Digest de 16 caracteres hexadecimales en minúscula."""
    return fingerprint(data, strict=strict).hexdigest


def hash_many(items: Iterable[TextLike], *, strict: bool = False) -> List[str]:
    return [hash_text(item, strict=strict) for item in items]
