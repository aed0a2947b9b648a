"""
Modelo de dominio: Página de un archivo CSV.

Una Page es la "foto" de una pantalla del visor: el encabezado, las filas
de datos que caben en esa página y el ancho de cada columna.

Decisiones de diseño:
- Los anchos se calculan SOLO con las filas de esta página, no con todo
  el archivo. Dos páginas pueden mostrar la misma columna con anchos
  distintos. Así el visor nunca necesita leer el archivo completo para
  dibujar una página.
- Las filas se guardan como tuplas para que la página sea realmente
  inmutable (una lista dentro de un frozen dataclass se podría mutar).
"""

from dataclasses import dataclass, field

CsvLine = tuple[str, ...]
"""Una fila ya separada por el delimitador: una cadena por columna."""

RECORD_NUMBER_LABEL = "No."
"""Encabezado de la columna sintética con el número de registro."""


@dataclass(frozen=True)
class Page:
    """Encabezado + filas de una página, con anchos de columna derivados."""

    page_number: int
    """Número de página (1-indexed). La primera página es 1, no 0."""

    header: CsvLine
    """Nombres de las columnas, en orden."""

    lines: tuple[CsvLine, ...] = ()
    """Filas de datos de esta página. Cada una tiene len(header) celdas."""

    _body_widths: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia y cálculo de anchos."""
        if self.page_number < 1:
            raise ValueError(f"Número de página fuera de rango: {self.page_number}")

        for index, line in enumerate(self.lines):
            if len(line) != self.column_count:
                raise ValueError(
                    f"La fila {index} tiene {len(line)} celdas, "
                    f"se esperaban {self.column_count}"
                )

        widths = tuple(
            max((len(line[column]) for line in self.lines), default=0)
            for column in range(self.column_count)
        )
        # frozen=True: la asignación pasa por object.__setattr__
        object.__setattr__(self, "_body_widths", widths)

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def line_count(self) -> int:
        """Cantidad de filas de datos (sin contar el encabezado)."""
        return len(self.lines)

    def __getitem__(self, line: int) -> CsvLine:
        return self.lines[line]

    def column_width(self, column: int, include_header: bool = True) -> int:
        """Ancho (en caracteres) necesario para mostrar una columna.

        Args:
            column: Índice de la columna (0-indexed).
            include_header: Si False, solo se consideran las celdas de datos.
                            En una página vacía eso da 0.

        Returns:
            max(len(encabezado), len de cada celda de la columna en ESTA página).
        """
        header_width = len(self.header[column]) if include_header else 0
        return max(header_width, self._body_widths[column])
