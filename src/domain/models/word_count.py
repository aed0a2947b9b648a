"""
Modelo de dominio: Resultado del conteo de palabras de un texto.

Todas las estadísticas se derivan de la lista de palabras ya filtrada
(sin stop words). Cada valor se calcula la primera vez que se pide y
queda memorizado en la instancia: pedir dos veces `unique_words` no
vuelve a tokenizar el texto.
"""

import math
from dataclasses import dataclass
from functools import cached_property

from src.domain.shared.tokenizer import WORD_PATTERN, filter_stop_words, tokenize

UNKNOWN_MARK = "*"
"""Sufijo de las palabras que no están en el diccionario."""


@dataclass(frozen=True)
class WordCount:
    """Estadísticas de palabras de un texto.

    frozen=True impide cambiar el texto, las stop words o el diccionario
    después de crear la instancia, así los valores memorizados nunca
    quedan desactualizados.
    """

    text: str
    """Texto a analizar."""

    stop_words: frozenset[str] = frozenset()
    """Palabras ignoradas por el conteo (comparación exacta)."""

    dictionary: frozenset[str] | None = None
    """Palabras conocidas. None significa "sin diccionario": no se marca
    ninguna palabra y unique_words_unknown_count es None."""

    word_pattern: str = WORD_PATTERN
    """Expresión regular que define qué es una palabra."""

    @cached_property
    def words(self) -> tuple[str, ...]:
        """Palabras del texto, en orden, sin las stop words."""
        return tuple(filter_stop_words(tokenize(self.text, self.word_pattern), self.stop_words))

    @cached_property
    def words_count(self) -> int:
        return len(self.words)

    @cached_property
    def unique_words(self) -> list[str]:
        """Palabras distintas, ordenadas lexicográficamente (sensible a mayúsculas)."""
        return sorted(set(self.words))

    @cached_property
    def unique_words_count(self) -> int:
        return len(self.unique_words)

    @cached_property
    def unique_words_unknown_marked(self) -> list[str]:
        """Palabras distintas con '*' al final si no están en el diccionario.

        Sin diccionario es igual a unique_words.
        """
        if self.dictionary is None:
            return list(self.unique_words)
        return sorted(
            word if word in self.dictionary else word + UNKNOWN_MARK
            for word in self.unique_words
        )

    @cached_property
    def unique_words_unknown_count(self) -> int | None:
        """Cantidad de palabras distintas que no están en el diccionario.

        None si no hay diccionario (no es lo mismo que 0).
        """
        if self.dictionary is None:
            return None
        return sum(1 for word in self.unique_words if word not in self.dictionary)

    @cached_property
    def average_word_length(self) -> float:
        """Promedio de caracteres por palabra.

        Con 0 palabras devuelve NaN: quien lo muestre debe revisarlo
        antes de formatearlo.
        """
        if not self.words:
            return math.nan
        return sum(len(word) for word in self.words) / len(self.words)
