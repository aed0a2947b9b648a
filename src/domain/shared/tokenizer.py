"""
Tokenizador de palabras para el contador de palabras.

Una "palabra" es una secuencia maximal de letras ASCII y guiones.
Dígitos, signos de puntuación (excepto el guion) y espacios separan
palabras. No se normalizan mayúsculas: "Mary" y "mary" son distintas.

Estas funciones devuelven generadores. Cada llamada produce una
secuencia nueva, así que se pueden volver a recorrer llamando otra vez.
"""

import re
from collections.abc import Iterable, Iterator

WORD_PATTERN = "[A-Za-z-]+"
"""Patrón por defecto de una palabra."""


def tokenize(text: str | None, pattern: str = WORD_PATTERN) -> Iterator[str]:
    """Extrae las palabras del texto en el orden en que aparecen.

    Ejemplos:
        >>> list(tokenize("Hello-World, 42 times"))
        ['Hello-World', 'times']
        >>> list(tokenize(""))
        []
    """
    for match in re.finditer(pattern, text or ""):
        yield match.group(0)


def filter_stop_words(tokens: Iterable[str], stop_words: Iterable[str]) -> Iterator[str]:
    """Descarta los tokens que están en stop_words (comparación exacta).

    Conserva el orden de los tokens restantes.
    """
    ignored = frozenset(stop_words)
    return (token for token in tokens if token not in ignored)
