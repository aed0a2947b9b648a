"""
Adaptador de entrada: Fuente de líneas desde un archivo en disco.

Cada lectura abre el archivo, recorre las líneas necesarias y lo cierra.
No se guarda ningún handle abierto entre una página y la siguiente.

Los saltos de línea se reconocen en modo universal (\\n, \\r\\n y \\r),
igual que Path.read_text().splitlines() pero sin cargar todo el archivo.
"""

from collections.abc import Iterator
from itertools import islice
from pathlib import Path

from src.domain.exceptions import SourceReadError
from src.domain.ports.line_source import LineSource


class FileLineSource(LineSource):
    """Lee un archivo de texto por rangos de líneas."""

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        """
        Args:
            path: Ruta al archivo.
            encoding: Codificación del archivo. Por defecto UTF-8.
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def name(self) -> str:
        return self._path.name

    def count_lines(self) -> int:
        return sum(1 for _ in self.read_lines(0))

    def read_lines(self, offset: int, limit: int | None = None) -> Iterator[str]:
        if offset < 0:
            raise ValueError(f"El offset no puede ser negativo: {offset}")
        if limit is not None and limit < 0:
            raise ValueError(f"El límite no puede ser negativo: {limit}")

        stop = None if limit is None else offset + limit
        return self._iter_lines(offset, stop)

    def _iter_lines(self, start: int, stop: int | None) -> Iterator[str]:
        # read_lines valida al llamar; este generador lee al iterar.
        try:
            with self._path.open(encoding=self._encoding) as handle:
                for line in islice(handle, start, stop):
                    yield line.rstrip("\n")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(str(self._path), str(e)) from e
