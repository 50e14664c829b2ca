"""
src/quadhash_core/cli.py
Front-end de Línea de Comandos v1.1.
Calcula el digest de cada argumento posicional, o de cada línea de stdin si no
se pasa ninguno, e imprime uno por línea. '--explain' añade las etapas
intermedias para comparar contra otras implementaciones etapa a etapa.

El pipeline recibe siempre bytes crudos: los argumentos se recodifican con
os.fsencode (un byte no UTF-8 vuelve a ser el byte original) y stdin se lee
en modo binario.
"""
import argparse
import logging
import os
import sys
from typing import BinaryIO, Iterable, Iterator, List, Optional, TextIO

from .hashing.quadratic import DegenerateInputError
from .kernel.digest import Fingerprint, fingerprint

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_DEGENERATE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadhash",
        description="Deterministic 16-hex-digit fingerprint of text strings.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Strings to hash. Reads stdin line by line when omitted.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on inputs whose leading quadratic coefficient is zero.",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the packed integer, chunks and roots next to the digest.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _format(fp: Fingerprint, explain: bool) -> str:
    if not explain:
        return fp.hexdigest
    roots = "degenerate" if fp.roots is None else f"{fp.roots.real},{fp.roots.imag}"
    a, b, c = fp.chunks
    return (
        f"{fp.hexdigest} packed={fp.packed} digits={fp.digits} "
        f"chunks={a},{b},{c} roots={roots} quad={fp.quad}"
    )


def _strip_terminator(line: bytes) -> bytes:
    """Quita exactamente un terminador (\\r\\n o \\n), nunca contenido."""
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


def _iter_inputs(texts: List[str], stdin: BinaryIO) -> Iterator[bytes]:
    if texts:
        # os.fsencode puede lanzar UnicodeEncodeError: se consume dentro del try de main
        for text in texts:
            yield os.fsencode(text)
        return
    for line in stdin:
        yield _strip_terminator(line)


def main(argv: Optional[Iterable[str]] = None, *, stdin: Optional[BinaryIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG)

    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    inputs = _iter_inputs(args.text, stdin)
    while True:
        try:
            data = next(inputs, None)
            if data is None:
                break
            fp = fingerprint(data, strict=args.strict)
        except DegenerateInputError as exc:
            print(f"error: {exc}", file=stderr)
            return EXIT_DEGENERATE
        except UnicodeError as exc:
            print(f"error: {exc}", file=stderr)
            return EXIT_BAD_INPUT
        print(_format(fp, args.explain), file=stdout)

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
