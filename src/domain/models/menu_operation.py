"""
Modelo de dominio: Operaciones del menú de navegación del visor CSV.

Es una enumeración cerrada: el visor solo conoce estas seis operaciones
y las muestra siempre en el orden en que están declaradas aquí.

Cada operación tiene:
- Una etiqueta para el menú, con la tecla resaltada en negrita.
  Ejemplo: "(n)ext page" → la "n" entre paréntesis va en negrita.
- Un patrón que debe coincidir con la línea COMPLETA que escribe el
  usuario. "n" es válido, "next" o " n" no.

JUMP_TO_PAGE es la única que captura un valor: el número de página
destino en "j<dígitos>".
"""

import re
from enum import Enum

from src.domain.shared.text_style import bold


class MenuOperation(Enum):
    """Operación del menú: (prefijo, tecla, sufijo, patrón de entrada)."""

    NEXT_PAGE = ("", "n", "ext page", r"n")
    PREVIOUS_PAGE = ("", "p", "revious page", r"p")
    FIRST_PAGE = ("", "f", "irst page", r"f")
    LAST_PAGE = ("", "l", "ast page", r"l")
    JUMP_TO_PAGE = ("", "j$", "ump to page", r"j([0-9]+)")
    EXIT = ("e", "x", "it", r"x")

    def __init__(self, prefix: str, key: str, suffix: str, pattern: str) -> None:
        self._prefix = prefix
        self._key = key
        self._suffix = suffix
        self.pattern = re.compile(pattern)

    def label(self, styled: bool = True) -> str:
        """Texto que se muestra en el menú.

        Ejemplos:
            >>> MenuOperation.EXIT.label(styled=False)
            'e(x)it'
            >>> MenuOperation.JUMP_TO_PAGE.label(styled=False)
            '(j$)ump to page'
        """
        return f"{self._prefix}({bold(self._key, styled)}){self._suffix}"

    def match(self, user_input: str) -> re.Match | None:
        """Compara la línea completa del usuario contra el patrón."""
        return self.pattern.fullmatch(user_input)

    @property
    def position(self) -> int:
        """Posición fija de la operación dentro del menú (0 = primera)."""
        return list(MenuOperation).index(self)

    @staticmethod
    def jump_target(match: re.Match) -> int:
        """Extrae el número de página capturado por JUMP_TO_PAGE."""
        return int(match.group(1))
