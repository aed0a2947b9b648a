"""
Adaptador de entrada: Texto completo desde un archivo.

El contador de palabras analiza el texto entero de una vez, así que
aquí no hay paginación: se lee todo con Path.read_text().
"""

from pathlib import Path

from src.domain.exceptions import SourceReadError


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Lee un archivo de texto completo.

    Raises:
        SourceReadError: Si el archivo no existe, no se puede leer o no
                         está en la codificación indicada.
    """
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(path), str(e)) from e
