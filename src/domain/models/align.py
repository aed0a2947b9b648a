"""
Modelo de dominio: Alineación de una celda dentro de su columna.
"""

from enum import Enum


class Align(Enum):
    """Dónde se coloca el relleno de una celda más corta que su columna.

    - LEFT: el texto va pegado a la izquierda (relleno al final).
    - RIGHT: el texto va pegado a la derecha (relleno al inicio).
    - CENTER: el relleno se reparte; si es impar, el espacio extra va
      a la derecha.
    """

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
