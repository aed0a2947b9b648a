"""
Utilidades de estilo de texto para terminal.

Solo se usa negrita (secuencias ANSI SGR). No hay colores: el visor
debe verse bien en cualquier terminal y también al redirigir la salida
a un archivo con styled=False.
"""

BOLD_START = "\u001b[1m"
BOLD_END = "\u001b[0m"


def bold(text: str, styled: bool = True) -> str:
    """Envuelve el texto en las secuencias de negrita.

    Ejemplos:
        >>> bold("n", styled=False)
        'n'
        >>> bold("n") == "\\u001b[1mn\\u001b[0m"
        True
    """
    if not styled:
        return text
    return f"{BOLD_START}{text}{BOLD_END}"


def strip_style(text: str) -> str:
    """Elimina las secuencias de negrita de un texto ya formateado."""
    return text.replace(BOLD_START, "").replace(BOLD_END, "")
