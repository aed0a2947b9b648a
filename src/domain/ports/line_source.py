"""
Puerto de entrada: Fuente de líneas de texto.

Define el contrato para leer un archivo de texto por rangos de líneas,
sin cargarlo completo en memoria.

    LineSource (interfaz)
    └── FileLineSource      → Archivo en disco, se abre en cada lectura

¿Por qué un puerto y no abrir el archivo directamente en CsvSource?
Porque CsvSource solo necesita "dame N líneas a partir de la línea X".
Si mañana el CSV viene de un ZIP o de la red, solo cambia el adaptador.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class LineSource(ABC):
    """Interfaz para leer líneas de un archivo de texto por rango."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente, para el título del visor.

        Ejemplo: 'clientes.csv'
        """
        ...

    @abstractmethod
    def count_lines(self) -> int:
        """Cuenta todas las líneas de la fuente (recorrido completo).

        Raises:
            SourceReadError: Si la fuente no se puede leer.
        """
        ...

    @abstractmethod
    def read_lines(self, offset: int, limit: int | None = None) -> Iterator[str]:
        """Devuelve las líneas a partir de `offset` (0-indexed).

        Las líneas se entregan sin el salto de línea final. La lectura
        recorre la fuente desde el inicio hasta `offset`; no hay índice
        de posiciones.

        Args:
            offset: Cantidad de líneas a saltar desde el inicio.
            limit: Máximo de líneas a devolver. None = hasta el final.

        Raises:
            SourceReadError: Si la fuente no se puede leer.
        """
        ...
